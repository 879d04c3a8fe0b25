"""Tests for retry conditions - behavior focused."""

import httpx
import pytest

from retryer.conditions import (
    RetryCondition,
    DefaultRetryCondition,
    PredicateRetryCondition,
    ExceptionTypesCondition,
    HttpStatusCondition,
)


# --- Helper to create proper mock responses ---


def create_response(status_code: int, text: str = "") -> httpx.Response:
    """Create a response with a proper request object."""
    request = httpx.Request("GET", "http://test")
    return httpx.Response(status_code, text=text, request=request)


def create_status_error(status_code: int) -> httpx.HTTPStatusError:
    """Create the error raise_for_status() would raise."""
    response = create_response(status_code)
    return httpx.HTTPStatusError(
        f"HTTP {status_code}", request=response.request, response=response
    )


class TestDefaultRetryCondition:
    """Test default retry decisions."""

    def test_retries_any_exception(self):
        """Default condition retries on every exception."""
        condition = DefaultRetryCondition()

        assert condition.should_retry_on_exception(ValueError("boom")) is True
        assert condition.should_retry_on_exception(RuntimeError()) is True

    def test_never_retries_on_value(self):
        """Default condition accepts every returned value."""
        condition = DefaultRetryCondition()

        assert condition.should_retry_on_value(None) is False
        assert condition.should_retry_on_value("result") is False

    def test_subclass_can_override_one_predicate(self):
        """Overriding one predicate keeps the other default."""

        class RetryOnNone(RetryCondition):
            def should_retry_on_value(self, value):
                return value is None

        condition = RetryOnNone()

        assert condition.should_retry_on_value(None) is True
        assert condition.should_retry_on_value(0) is False
        assert condition.should_retry_on_exception(KeyError()) is True


class TestPredicateRetryCondition:
    """Test conditions built from callables."""

    def test_uses_given_callables(self):
        """Callables decide both cases."""
        condition = PredicateRetryCondition(
            on_exception=lambda e: isinstance(e, TimeoutError),
            on_value=lambda v: v == "pending",
        )

        assert condition.should_retry_on_exception(TimeoutError()) is True
        assert condition.should_retry_on_exception(ValueError()) is False
        assert condition.should_retry_on_value("pending") is True
        assert condition.should_retry_on_value("done") is False

    def test_missing_callables_keep_defaults(self):
        """Unset callables fall back to the defaults."""
        condition = PredicateRetryCondition()

        assert condition.should_retry_on_exception(ValueError()) is True
        assert condition.should_retry_on_value("anything") is False


class TestExceptionTypesCondition:
    """Test type-based retry decisions."""

    def test_retries_only_listed_types(self):
        """Only listed exception types are retried."""
        condition = ExceptionTypesCondition(retry_on=(ConnectionError, TimeoutError))

        assert condition.should_retry_on_exception(ConnectionResetError()) is True
        assert condition.should_retry_on_exception(TimeoutError()) is True
        assert condition.should_retry_on_exception(ValueError()) is False

    def test_give_up_types_take_precedence(self):
        """A give-up type wins over a broader retry type."""
        condition = ExceptionTypesCondition(
            retry_on=(OSError,), give_up_on=(FileNotFoundError,)
        )

        assert condition.should_retry_on_exception(OSError()) is True
        assert condition.should_retry_on_exception(FileNotFoundError()) is False

    def test_requires_at_least_one_type(self):
        """An empty retry list is a configuration error."""
        with pytest.raises(ValueError):
            ExceptionTypesCondition(retry_on=())


class TestHttpStatusCondition:
    """Test HTTP-aware retry decisions."""

    def test_retries_transport_errors(self):
        """Connection failures and timeouts are retried."""
        condition = HttpStatusCondition()

        assert condition.should_retry_on_exception(httpx.ConnectError("refused")) is True
        assert condition.should_retry_on_exception(httpx.ReadTimeout("slow")) is True

    @pytest.mark.parametrize("status_code", [429, 500, 502, 503, 504])
    def test_retries_throttling_and_server_errors(self, status_code):
        """429 and 5xx statuses trigger a retry."""
        condition = HttpStatusCondition()

        assert condition.should_retry_on_exception(create_status_error(status_code)) is True

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404])
    def test_does_not_retry_client_errors(self, status_code):
        """4xx statuses (except 429) are permanent."""
        condition = HttpStatusCondition()

        assert condition.should_retry_on_exception(create_status_error(status_code)) is False

    def test_does_not_retry_unrelated_exceptions(self):
        """Non-HTTP exceptions are not retried."""
        assert HttpStatusCondition().should_retry_on_exception(ValueError()) is False

    def test_retries_on_returned_retryable_response(self):
        """A returned 503 response is retried, a 200 is accepted."""
        condition = HttpStatusCondition()

        assert condition.should_retry_on_value(create_response(503)) is True
        assert condition.should_retry_on_value(create_response(200)) is False
        assert condition.should_retry_on_value("not a response") is False

    def test_custom_status_codes(self):
        """Retryable statuses are configurable."""
        condition = HttpStatusCondition(retryable_status_codes={408})

        assert condition.is_retryable_status(408) is True
        assert condition.is_retryable_status(503) is False
