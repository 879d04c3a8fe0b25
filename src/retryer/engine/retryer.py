"""
The retry engine: attempt, decide, wait, repeat.
"""

import logging
from typing import Any, Awaitable, Callable, TypeVar

from .config import RetryConfig
from .outcome import Outcome
from .sleep import AsyncSleeper, Sleeper, async_sleep, blocking_sleep
from ..exceptions import RetryCancelledError, RetryExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

OnRetry = Callable[[int, Outcome[Any], float], None]


class Retryer:
    """
    Invokes an operation until it succeeds, the condition gives up, or the
    attempt budget runs out.

    A call ends in exactly one of three ways:
    - the first value the condition accepts is returned;
    - an exception the condition refuses to retry propagates unchanged;
    - RetryExhaustedError is raised once the budget is consumed.

    The instance holds no per-call state and may be shared between threads.

    Example:
        >>> retryer = Retryer(
        ...     RetryConfig(max_attempts=5, backoff=exponential_jitter(0.5, 30.0)),
        ... )
        >>> data = retryer.retry(lambda: fetch("https://example.com"))
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        *,
        sleeper: Sleeper | None = None,
        async_sleeper: AsyncSleeper | None = None,
        on_retry: OnRetry | None = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Retry configuration (default: RetryConfig())
            sleeper: Blocking wait between attempts (default: time.sleep)
            async_sleeper: Awaitable wait used by ``aretry`` (default: asyncio.sleep)
            on_retry: Optional callback(attempt, outcome, delay) called before each wait
                instead of the default warning log
        """
        self.config = config if config is not None else RetryConfig()
        self.sleeper = sleeper or blocking_sleep
        self.async_sleeper = async_sleeper or async_sleep
        self.on_retry = on_retry

    @property
    def max_attempts(self) -> int:
        return self.config.max_attempts

    def retry(self, operation: Callable[[], T]) -> T:
        """
        Run ``operation`` under this retry policy.

        Args:
            operation: Zero-argument callable, possibly raising

        Returns:
            The first value the retry condition accepts

        Raises:
            RetryExhaustedError: If every permitted attempt qualified for a retry
            RetryCancelledError: If the sleeper was cancelled during a wait
        """
        if operation is None:
            raise TypeError("operation may not be None")

        attempt = 0
        performed = 0
        last_value: T | None = None
        last_exception: Exception | None = None

        while self.config.has_budget(attempt):
            outcome = Outcome.capture(operation)
            performed += 1
            if outcome.is_success:
                last_value = outcome.value
                if not self._should_retry(outcome):
                    return last_value  # type: ignore[return-value]
            else:
                last_exception = outcome.error
                if not self._should_retry(outcome):
                    raise last_exception  # type: ignore[misc]

            if not self.config.is_unbounded:
                attempt += 1
            # No wait after the final attempt
            if self.config.has_budget(attempt):
                delay = self._next_delay(attempt, performed, outcome)
                try:
                    self.sleeper(delay)
                except RetryCancelledError as e:
                    self._note_cancel(e, performed)
                    raise

        raise self._exhausted(last_value, last_exception)

    async def aretry(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Async variant of ``retry`` for coroutine functions.

        Waits with the async sleeper, so cancelling the surrounding task
        stops the loop with ``asyncio.CancelledError``.
        """
        if operation is None:
            raise TypeError("operation may not be None")

        attempt = 0
        performed = 0
        last_value: T | None = None
        last_exception: Exception | None = None

        while self.config.has_budget(attempt):
            outcome = await Outcome.acapture(operation)
            performed += 1
            if outcome.is_success:
                last_value = outcome.value
                if not self._should_retry(outcome):
                    return last_value  # type: ignore[return-value]
            else:
                last_exception = outcome.error
                if not self._should_retry(outcome):
                    raise last_exception  # type: ignore[misc]

            if not self.config.is_unbounded:
                attempt += 1
            if self.config.has_budget(attempt):
                delay = self._next_delay(attempt, performed, outcome)
                try:
                    await self.async_sleeper(delay)
                except RetryCancelledError as e:
                    self._note_cancel(e, performed)
                    raise

        raise self._exhausted(last_value, last_exception)

    __call__ = retry

    def _should_retry(self, outcome: Outcome[Any]) -> bool:
        condition = self.config.condition
        if outcome.is_success:
            return condition.should_retry_on_value(outcome.value)
        retry = condition.should_retry_on_exception(outcome.error)  # type: ignore[arg-type]
        if not retry:
            logger.debug(f"Not retrying {outcome.error!r}")
        return retry

    def _next_delay(self, attempt: int, performed: int, outcome: Outcome[Any]) -> float:
        # attempt stays at 0 for unbounded budgets; performed always counts up
        delay = self.config.backoff.delay(attempt)
        if self.on_retry:
            self.on_retry(performed, outcome, delay)
        else:
            logger.warning(
                f"Retry {performed}/{self._budget_label()}: {outcome}, "
                f"waiting {delay:.1f}s"
            )
        return delay

    def _exhausted(self, last_value: Any, last_exception: Exception | None) -> RetryExhaustedError:
        logger.error(f"All {self.max_attempts} attempts exhausted")
        return RetryExhaustedError(
            "Exceeded number of retries",
            attempts=self.max_attempts,
            last_return_value=last_value,
            last_exception=last_exception,
        )

    def _budget_label(self) -> str:
        return "unbounded" if self.config.is_unbounded else str(self.max_attempts)

    @staticmethod
    def _note_cancel(error: RetryCancelledError, performed: int) -> None:
        if error.attempt is None:
            error.attempt = performed
        logger.info(f"Retry cancelled after attempt {performed}")

    def __repr__(self) -> str:
        return f"Retryer(max_attempts={self._budget_label()}, condition={self.config.condition!r})"
