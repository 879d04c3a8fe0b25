"""
Suspension capabilities used between attempts.
"""

import asyncio
import threading
import time
from typing import Awaitable, Callable, Protocol

from ..exceptions import RetryCancelledError

AsyncSleeper = Callable[[float], Awaitable[None]]


class Sleeper(Protocol):
    """Blocks the calling thread for the given number of seconds."""

    def __call__(self, seconds: float) -> None: ...


def blocking_sleep(seconds: float) -> None:
    """Default sleeper; ``KeyboardInterrupt`` propagates out of the wait."""
    time.sleep(seconds)


async def async_sleep(seconds: float) -> None:
    """Default async sleeper; task cancellation propagates as CancelledError."""
    await asyncio.sleep(seconds)


class InterruptibleSleeper:
    """
    Sleeper that another thread can cancel.

    Once ``cancel()`` is called, any pending or future wait raises
    RetryCancelledError until ``reset()`` is called.

    Example:
        >>> sleeper = InterruptibleSleeper()
        >>> retryer = Retryer(config, sleeper=sleeper)
        >>> # from a shutdown hook:
        >>> sleeper.cancel()
    """

    def __init__(self) -> None:
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Wake up every waiting caller and make them stop retrying."""
        self._cancelled.set()

    def reset(self) -> None:
        self._cancelled.clear()

    def __call__(self, seconds: float) -> None:
        if self._cancelled.wait(timeout=seconds):
            raise RetryCancelledError("Retry wait cancelled")
