"""
Retryer - Retry Fallible Operations with Pluggable Backoff.

Runs an operation until it succeeds, a retry condition gives up, or the
attempt budget is exhausted, waiting between attempts as a backoff strategy
dictates.
"""

from .backoff import (
    Backoff,
    ConstantBackoff,
    LinearBackoff,
    ExponentialBackoff,
    JitteredBackoff,
    constant,
    linear,
    exponential,
    exponential_jitter,
    composite_jitter,
)
from .conditions import (
    RetryCondition,
    DefaultRetryCondition,
    PredicateRetryCondition,
    ExceptionTypesCondition,
    HttpStatusCondition,
)
from .engine import (
    RetryConfig,
    INFINITE_MAX_ATTEMPTS,
    Outcome,
    InterruptibleSleeper,
    Retryer,
    with_retry,
    async_with_retry,
)
from .exceptions import RetryError, RetryExhaustedError, RetryCancelledError

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Engine
    "Retryer",
    "RetryConfig",
    "INFINITE_MAX_ATTEMPTS",
    "Outcome",
    "InterruptibleSleeper",
    "with_retry",
    "async_with_retry",
    # Conditions
    "RetryCondition",
    "DefaultRetryCondition",
    "PredicateRetryCondition",
    "ExceptionTypesCondition",
    "HttpStatusCondition",
    # Backoff
    "Backoff",
    "ConstantBackoff",
    "LinearBackoff",
    "ExponentialBackoff",
    "JitteredBackoff",
    "constant",
    "linear",
    "exponential",
    "exponential_jitter",
    "composite_jitter",
    # Exceptions
    "RetryError",
    "RetryExhaustedError",
    "RetryCancelledError",
]
