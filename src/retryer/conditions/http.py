"""
Retry condition for HTTP calls made with httpx.

Transport failures and throttling / server errors are retried; other client
errors (4xx) are treated as permanent.
"""

import logging
from typing import Any

import httpx

from .base import RetryCondition

logger = logging.getLogger(__name__)

DEFAULT_RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})


class HttpStatusCondition(RetryCondition):
    """
    Retry unless the server answered with a non-retryable status.

    Works both for operations that raise (``response.raise_for_status()``)
    and for operations that return the ``httpx.Response`` directly.

    Args:
        retryable_status_codes: Statuses that trigger a retry
            (default: 429, 500, 502, 503, 504)
    """

    def __init__(self, retryable_status_codes: set[int] | frozenset[int] | None = None):
        if retryable_status_codes is None:
            retryable_status_codes = DEFAULT_RETRYABLE_STATUS_CODES
        self.retryable_status_codes = frozenset(retryable_status_codes)

    def is_retryable_status(self, status_code: int) -> bool:
        """Check if the given status code should trigger a retry."""
        return status_code in self.retryable_status_codes

    def should_retry_on_exception(self, exc: Exception) -> bool:
        if isinstance(exc, httpx.TransportError):
            return True
        if isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
            if self.is_retryable_status(status_code):
                return True
            logger.debug(f"Not retrying HTTP {status_code} for {exc.request.url}")
            return False
        return False

    def should_retry_on_value(self, value: Any) -> bool:
        if isinstance(value, httpx.Response):
            return self.is_retryable_status(value.status_code)
        return False

    def __repr__(self) -> str:
        return f"HttpStatusCondition(retryable_status_codes={sorted(self.retryable_status_codes)})"
