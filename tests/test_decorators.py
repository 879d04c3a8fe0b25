"""Tests for retry decorators - behavior focused."""

import pytest

from retryer import (
    ExceptionTypesCondition,
    RetryConfig,
    RetryExhaustedError,
    async_with_retry,
    constant,
    with_retry,
)


class TestWithRetry:
    """Test the synchronous decorator."""

    def test_retries_with_bound_arguments(self):
        """Arguments are passed on every attempt."""
        delays = []
        seen = []

        @with_retry(RetryConfig(max_attempts=3, backoff=constant(1.0)), sleeper=delays.append)
        def divide(a, b=1):
            seen.append((a, b))
            if len(seen) < 2:
                raise ZeroDivisionError("flaky")
            return a / b

        assert divide(6, b=3) == 2.0
        assert seen == [(6, 3), (6, 3)]
        assert delays == [1.0]

    def test_preserves_function_metadata(self):
        """functools.wraps keeps name and docstring."""

        @with_retry()
        def fetch():
            """Fetch something."""
            return 1

        assert fetch.__name__ == "fetch"
        assert fetch.__doc__ == "Fetch something."

    def test_raises_exhaustion(self):
        """Exhaustion surfaces from the decorated call."""

        @with_retry(RetryConfig(max_attempts=2), sleeper=lambda _: None)
        def broken():
            raise RuntimeError("down")

        with pytest.raises(RetryExhaustedError):
            broken()

    def test_exposes_retryer(self):
        """The underlying engine is reachable for inspection."""

        @with_retry(RetryConfig(max_attempts=4))
        def noop():
            return None

        assert noop.retryer.max_attempts == 4


class TestAsyncWithRetry:
    """Test the async decorator."""

    @pytest.mark.asyncio
    async def test_retries_coroutine(self):
        """Coroutine functions are awaited on every attempt."""
        delays = []
        calls = 0

        async def record(seconds):
            delays.append(seconds)

        @async_with_retry(RetryConfig(max_attempts=3, backoff=constant(0.25)), sleeper=record)
        async def flaky(value):
            nonlocal calls
            calls += 1
            if calls < 3:
                raise ConnectionError("reset")
            return value

        assert await flaky("ok") == "ok"
        assert delays == [0.25, 0.25]

    @pytest.mark.asyncio
    async def test_non_retryable_error_propagates(self):
        """Errors rejected by the condition pass through unchanged."""
        error = PermissionError("denied")
        condition = ExceptionTypesCondition(retry_on=(ConnectionError,))

        @async_with_retry(RetryConfig(max_attempts=3, condition=condition))
        async def forbidden():
            raise error

        with pytest.raises(PermissionError) as exc_info:
            await forbidden()

        assert exc_info.value is error
