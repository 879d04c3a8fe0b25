"""
Retryer - Backoff Strategies.

Constant, linear and exponential delays, plus jitter composable over any of them.
"""

from .strategies import (
    Backoff,
    RandomSource,
    MAX_DELAY,
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

__all__ = [
    # Protocols
    "Backoff",
    "RandomSource",
    # Limits
    "MAX_DELAY",
    # Strategies
    "ConstantBackoff",
    "LinearBackoff",
    "ExponentialBackoff",
    "JitteredBackoff",
    # Factories
    "constant",
    "linear",
    "exponential",
    "exponential_jitter",
    "composite_jitter",
]
