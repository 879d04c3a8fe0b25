"""
Tagged result of a single attempt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


class OutcomeStatus(str, Enum):
    """Whether an attempt returned or raised."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of one attempt: either a returned value or a raised exception.

    Attributes:
        status: SUCCESS or FAILURE
        value: Returned value if successful
        error: Raised exception if failed
    """

    status: OutcomeStatus
    value: T | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(OutcomeStatus.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Outcome[T]":
        return cls(OutcomeStatus.FAILURE, error=error)

    @classmethod
    def capture(cls, operation: Callable[[], T]) -> "Outcome[T]":
        """Call ``operation`` and record what happened."""
        try:
            return cls.success(operation())
        except Exception as e:
            return cls.failure(e)

    @classmethod
    async def acapture(cls, operation: Callable[[], Awaitable[T]]) -> "Outcome[T]":
        """Await ``operation()`` and record what happened."""
        try:
            return cls.success(await operation())
        except Exception as e:
            return cls.failure(e)

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status == OutcomeStatus.FAILURE

    def unwrap(self) -> T:
        """Get the value or raise the stored exception."""
        if self.is_failure:
            raise self.error  # type: ignore[misc]
        return self.value  # type: ignore[return-value]

    def __str__(self) -> str:
        if self.is_failure:
            return f"raised {self.error!r}"
        return f"returned {self.value!r}"
