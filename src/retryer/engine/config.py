"""
Retry configuration and attempt budget definitions.
"""

from dataclasses import dataclass, field

from ..backoff import Backoff, ConstantBackoff
from ..conditions import DefaultRetryCondition, RetryCondition

INFINITE_MAX_ATTEMPTS = -1
DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Immutable, so one instance can be shared by any number of callers.

    Attributes:
        max_attempts: Maximum number of attempts, or -1 for unbounded (default: 3)
        condition: Decides whether an outcome warrants another attempt
            (default: retry on any exception, never on a returned value)
        backoff: Computes the wait after each attempt (default: no wait)
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    condition: RetryCondition = field(default_factory=DefaultRetryCondition)
    backoff: Backoff = field(default_factory=ConstantBackoff)

    def __post_init__(self) -> None:
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise TypeError(f"max_attempts must be an int, got {type(self.max_attempts).__name__}")
        if self.max_attempts < INFINITE_MAX_ATTEMPTS:
            raise ValueError("max_attempts must be either -1 or any other non-negative int")
        if self.condition is None:
            raise TypeError("condition may not be None")
        if not (
            callable(getattr(self.condition, "should_retry_on_exception", None))
            and callable(getattr(self.condition, "should_retry_on_value", None))
        ):
            raise TypeError(f"condition must implement the RetryCondition predicates, got {self.condition!r}")
        if self.backoff is None:
            raise TypeError("backoff may not be None")
        if not isinstance(self.backoff, Backoff):
            raise TypeError(f"backoff must implement delay(attempt), got {self.backoff!r}")

    @property
    def is_unbounded(self) -> bool:
        """Whether attempts continue until the condition stops qualifying."""
        return self.max_attempts == INFINITE_MAX_ATTEMPTS

    def has_budget(self, attempt: int) -> bool:
        """Check if another attempt is allowed after ``attempt`` counted attempts."""
        return self.is_unbounded or attempt < self.max_attempts

    @classmethod
    def no_retry(cls, condition: RetryCondition | None = None) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_attempts=1, condition=condition or DefaultRetryCondition())

    @classmethod
    def forever(
        cls,
        backoff: Backoff | None = None,
        condition: RetryCondition | None = None,
    ) -> "RetryConfig":
        """Preset that keeps retrying until the condition stops qualifying."""
        return cls(
            max_attempts=INFINITE_MAX_ATTEMPTS,
            condition=condition or DefaultRetryCondition(),
            backoff=backoff or ConstantBackoff(),
        )
