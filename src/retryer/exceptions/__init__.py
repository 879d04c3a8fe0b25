"""
Retryer - Exception Hierarchy.

Errors raised by the retry engine itself, as opposed to the retried operation.
"""

from .base import (
    RetryError,
    RetryExhaustedError,
    RetryCancelledError,
)

__all__ = [
    "RetryError",
    "RetryExhaustedError",
    "RetryCancelledError",
]
