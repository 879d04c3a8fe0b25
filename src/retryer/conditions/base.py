"""
Retry conditions decide, per attempt outcome, whether to try again.
"""

from typing import Any, Callable


class RetryCondition:
    """
    Policy consulted by the engine after every attempt.

    Subclasses override either predicate. By default any exception is retried
    and any returned value is accepted.
    """

    def should_retry_on_exception(self, exc: Exception) -> bool:
        """Return True if the attempt that raised ``exc`` should be retried."""
        return True

    def should_retry_on_value(self, value: Any) -> bool:
        """Return True if the attempt that returned ``value`` should be retried."""
        return False


class DefaultRetryCondition(RetryCondition):
    """Retry on any exception, never on a returned value."""

    def __repr__(self) -> str:
        return "DefaultRetryCondition()"


class PredicateRetryCondition(RetryCondition):
    """
    Condition assembled from plain callables.

    Args:
        on_exception: Called with the raised exception; None keeps the default
        on_value: Called with the returned value; None keeps the default
    """

    def __init__(
        self,
        on_exception: Callable[[Exception], bool] | None = None,
        on_value: Callable[[Any], bool] | None = None,
    ):
        self._on_exception = on_exception
        self._on_value = on_value

    def should_retry_on_exception(self, exc: Exception) -> bool:
        if self._on_exception is None:
            return super().should_retry_on_exception(exc)
        return bool(self._on_exception(exc))

    def should_retry_on_value(self, value: Any) -> bool:
        if self._on_value is None:
            return super().should_retry_on_value(value)
        return bool(self._on_value(value))


class ExceptionTypesCondition(RetryCondition):
    """
    Retry only on the listed exception types.

    ``give_up_on`` takes precedence, so a subclass of a retryable type can
    still be excluded.
    """

    def __init__(
        self,
        retry_on: tuple[type[Exception], ...] = (Exception,),
        give_up_on: tuple[type[Exception], ...] = (),
    ):
        if not retry_on:
            raise ValueError("retry_on must name at least one exception type")
        self.retry_on = tuple(retry_on)
        self.give_up_on = tuple(give_up_on)

    def should_retry_on_exception(self, exc: Exception) -> bool:
        if self.give_up_on and isinstance(exc, self.give_up_on):
            return False
        return isinstance(exc, self.retry_on)

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self.retry_on)
        return f"ExceptionTypesCondition(retry_on=({names}))"
