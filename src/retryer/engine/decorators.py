"""
Retry decorators for plain and async functions.
"""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .config import RetryConfig
from .retryer import OnRetry, Retryer
from .sleep import AsyncSleeper, Sleeper

P = ParamSpec("P")
T = TypeVar("T")


def with_retry(
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
    sleeper: Sleeper | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, outcome, delay) called before each wait
        sleeper: Optional blocking wait (default: time.sleep)

    Returns:
        Decorated function with retry behavior
    """
    retryer = Retryer(config, sleeper=sleeper, on_retry=on_retry)

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return retryer.retry(functools.partial(func, *args, **kwargs))

        wrapper.retryer = retryer  # type: ignore[attr-defined]
        return wrapper

    return decorator


def async_with_retry(
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
    sleeper: AsyncSleeper | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, outcome, delay) called before each wait
        sleeper: Optional async wait (default: asyncio.sleep)

    Returns:
        Decorated async function with retry behavior
    """
    retryer = Retryer(config, async_sleeper=sleeper, on_retry=on_retry)

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await retryer.aretry(functools.partial(func, *args, **kwargs))

        wrapper.retryer = retryer  # type: ignore[attr-defined]
        return wrapper

    return decorator
