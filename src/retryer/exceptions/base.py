"""
Exception classes raised by the retry engine.

Faults raised by the retried operation itself are never wrapped in these
classes unless the attempt budget runs out.
"""

from typing import Any


class RetryError(Exception):
    """Base exception for all errors raised by the retry engine."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RetryExhaustedError(RetryError):
    """
    Raised when the attempt budget is consumed without a qualifying success.

    The last observed exception (if any) is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Exceeded number of retries",
        *,
        attempts: int,
        last_return_value: Any = None,
        last_exception: BaseException | None = None,
    ):
        super().__init__(message)
        self._attempts = attempts
        self._last_return_value = last_return_value
        self._last_exception = last_exception
        self.__cause__ = last_exception

    @property
    def attempts(self) -> int:
        """Number of attempts the engine was allowed to perform."""
        return self._attempts

    @property
    def last_return_value(self) -> Any:
        """Value returned by the last successful call, or None."""
        return self._last_return_value

    @property
    def last_exception(self) -> BaseException | None:
        """Exception raised by the last failing call, or None."""
        return self._last_exception

    def __str__(self) -> str:
        return (
            f"{self.message}: maxAttempts={self.attempts}, "
            f"lastReturnValue={self.last_return_value!r}, "
            f"lastException={self.last_exception!r}"
        )


class RetryCancelledError(RetryError):
    """Raised when an inter-attempt wait is interrupted by cancellation."""

    def __init__(self, message: str = "Retry cancelled", *, attempt: int | None = None):
        super().__init__(message)
        self.attempt = attempt

    def __str__(self) -> str:
        if self.attempt is None:
            return self.message
        return f"{self.message} (after attempt {self.attempt})"
