"""
Backoff strategies mapping an attempt number to a wait duration.

All durations are seconds as floats. Attempt numbers are 1-based: after the
first failed attempt the engine asks for ``delay(1)``.
"""

import math
import random
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Protocol, runtime_checkable

# Largest exponent applied before the float multiply; 2.0 ** 1024 overflows.
_MAX_EXPONENT = 1023

# Upper bound on any exponential delay, about 68 years.
MAX_DELAY = float(2**31 - 1)


@runtime_checkable
class Backoff(Protocol):
    """Protocol for backoff delay calculation."""

    def delay(self, attempt: int) -> float:
        """Return the delay in seconds to wait after ``attempt`` attempts."""
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can draw a uniform float, e.g. ``random.Random``."""

    def uniform(self, a: float, b: float) -> float: ...


def _as_seconds(name: str, value: float | timedelta | None) -> float:
    """Normalize a duration to non-negative float seconds."""
    if value is None:
        raise TypeError(f"{name} may not be None")
    if isinstance(value, timedelta):
        value = value.total_seconds()
    value = float(value)
    if math.isnan(value) or value < 0:
        raise ValueError(f"{name} must be >= 0 but is {value}")
    return value


def _check_attempt(attempt: int) -> None:
    if attempt < 0:
        raise ValueError(f"attempt must be >= 0 but is {attempt}")


@dataclass(frozen=True)
class ConstantBackoff:
    """
    Fixed delay between attempts.

    Attributes:
        timeout: Delay in seconds returned for every attempt (default: 0.0)
    """

    timeout: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "timeout", _as_seconds("timeout", self.timeout))

    def delay(self, attempt: int) -> float:
        _check_attempt(attempt)
        return self.timeout


@dataclass(frozen=True)
class LinearBackoff:
    """
    Linearly growing delay with an inclusive cap.

    Delay = min(max_delay, base * attempt)

    Attributes:
        base: Delay added per attempt in seconds (default: 0.0)
        max_delay: Maximum delay in seconds (default: 0.0)
    """

    base: float = 0.0
    max_delay: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", _as_seconds("base", self.base))
        object.__setattr__(self, "max_delay", _as_seconds("max_delay", self.max_delay))
        if math.isinf(self.base):
            raise ValueError("base must be finite")

    def delay(self, attempt: int) -> float:
        _check_attempt(attempt)
        return min(self.max_delay, self.base * attempt)


@dataclass(frozen=True)
class ExponentialBackoff:
    """
    Doubling delay with an inclusive cap, rounded to the millisecond.

    Delay = min(max_delay, base * 2 ** (attempt - 1))

    Attributes:
        base: Delay after the first attempt in seconds (default: 1.0)
        max_delay: Maximum delay in seconds (default: MAX_DELAY)
    """

    base: float = 1.0
    max_delay: float = MAX_DELAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", _as_seconds("base", self.base))
        object.__setattr__(self, "max_delay", _as_seconds("max_delay", self.max_delay))
        if math.isinf(self.base):
            raise ValueError("base must be finite")

    def delay(self, attempt: int) -> float:
        _check_attempt(attempt)
        exponent = min(attempt - 1, _MAX_EXPONENT)
        raw = round(self.base * 2.0**exponent, 3)
        return min(self.max_delay, raw, MAX_DELAY)


@dataclass(frozen=True)
class JitteredBackoff:
    """
    Randomly shortens the delay of any other strategy.

    Given w = inner.delay(attempt), draws uniformly from [w * (1 - r), w].
    r = 0 disables jitter, r = 1 spans the full range [0, w].

    Attributes:
        inner: Strategy producing the upper bound of each delay
        randomization_factor: Fraction of the delay that may be shaved off
        rng: Random source; pass a seeded ``random.Random`` for repeatable delays
    """

    inner: Backoff
    randomization_factor: float = 0.5
    rng: RandomSource = field(default_factory=random.Random, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.inner is None:
            raise TypeError("inner backoff may not be None")
        if not isinstance(self.inner, Backoff):
            raise TypeError(f"inner must implement delay(attempt), got {type(self.inner).__name__}")
        if self.rng is None:
            object.__setattr__(self, "rng", random.Random())
        factor = self.randomization_factor
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            raise TypeError(f"randomization_factor must be a number but is {factor!r}")
        if math.isnan(factor) or not 0.0 <= factor <= 1.0:
            raise ValueError(f"randomization_factor must be within [0.0, 1.0] but is {factor}")

    def delay(self, attempt: int) -> float:
        upper = self.inner.delay(attempt)
        if self.randomization_factor == 0.0:
            return upper
        lower = upper * (1.0 - self.randomization_factor)
        return self.rng.uniform(lower, upper)


def constant(timeout: float | timedelta = 0.0) -> ConstantBackoff:
    """Wait the same ``timeout`` after every attempt."""
    return ConstantBackoff(timeout)


def linear(base: float | timedelta, max_delay: float | timedelta) -> LinearBackoff:
    """Wait ``base * attempt``, capped at ``max_delay``."""
    return LinearBackoff(base, max_delay)


def exponential(
    base: float | timedelta = 1.0,
    max_delay: float | timedelta = MAX_DELAY,
) -> ExponentialBackoff:
    """Wait ``base * 2 ** (attempt - 1)``, capped at ``max_delay``."""
    return ExponentialBackoff(base, max_delay)


def composite_jitter(
    inner: Backoff,
    randomization_factor: float = 0.5,
    rng: RandomSource | None = None,
) -> JitteredBackoff:
    """Apply jitter on top of any backoff strategy."""
    return JitteredBackoff(inner, randomization_factor, rng)


def exponential_jitter(
    base: float | timedelta = 1.0,
    max_delay: float | timedelta = MAX_DELAY,
    randomization_factor: float = 0.5,
    rng: RandomSource | None = None,
) -> JitteredBackoff:
    """Exponential backoff with jitter, i.e. ``composite_jitter(exponential(...))``."""
    return JitteredBackoff(ExponentialBackoff(base, max_delay), randomization_factor, rng)
