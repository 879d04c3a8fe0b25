"""
Retryer - Retry Engine.

Attempt budget configuration, the retry loop, and decorators built on it.
"""

from .config import DEFAULT_MAX_ATTEMPTS, INFINITE_MAX_ATTEMPTS, RetryConfig
from .outcome import Outcome, OutcomeStatus
from .sleep import InterruptibleSleeper, Sleeper
from .retryer import Retryer
from .decorators import with_retry, async_with_retry

__all__ = [
    "RetryConfig",
    "DEFAULT_MAX_ATTEMPTS",
    "INFINITE_MAX_ATTEMPTS",
    "Outcome",
    "OutcomeStatus",
    "Sleeper",
    "InterruptibleSleeper",
    "Retryer",
    "with_retry",
    "async_with_retry",
]
