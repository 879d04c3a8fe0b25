"""
Retryer - Retry Conditions.

Policies deciding whether a raised exception or returned value warrants another attempt.
"""

from .base import (
    RetryCondition,
    DefaultRetryCondition,
    PredicateRetryCondition,
    ExceptionTypesCondition,
)
from .http import DEFAULT_RETRYABLE_STATUS_CODES, HttpStatusCondition

__all__ = [
    "RetryCondition",
    "DefaultRetryCondition",
    "PredicateRetryCondition",
    "ExceptionTypesCondition",
    "HttpStatusCondition",
    "DEFAULT_RETRYABLE_STATUS_CODES",
]
