"""Sampling decision shared by every stat of a single call."""

import math
import numbers
import random


def validate_rate(rate) -> float:
    """Reject sample rates that cannot be a probability of sending."""
    if isinstance(rate, bool) or not isinstance(rate, numbers.Real):
        raise TypeError(f"Sample rate must be a number, got {type(rate).__name__}")
    if math.isnan(rate) or rate <= 0:
        raise ValueError(f"Sample rate must be in (0, 1], got {rate}")
    return rate


def should_send(rate, rng=random.random) -> bool:
    """Decide whether this call transmits.

    Rates of 1 or more always send and never draw from ``rng``. Below 1 a
    single draw in [0, 1) is taken and the call sends when it is <= rate.
    """
    if rate >= 1:
        return True
    return rng() <= rate
