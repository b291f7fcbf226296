"""Line encoder: formats metric values into statsd wire fragments."""

import math
import numbers


def encode_counter(delta: int) -> str:
    """Format a counter delta as ``<delta>|c``."""
    if isinstance(delta, bool) or not isinstance(delta, numbers.Integral):
        raise TypeError(f"Counter delta must be an integer, got {type(delta).__name__}")
    return f"{int(delta)}|c"


def encode_timing(milliseconds) -> str:
    """Format a duration as ``<ms>|ms``.

    Fractional milliseconds are truncated toward zero.
    """
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, numbers.Real):
        raise TypeError(
            f"Timing must be a number of milliseconds, got {type(milliseconds).__name__}"
        )
    if math.isnan(milliseconds) or math.isinf(milliseconds):
        raise ValueError(f"Timing must be finite, got {milliseconds}")
    if milliseconds < 0:
        raise ValueError(f"Timing must be non-negative, got {milliseconds}")
    return f"{int(milliseconds)}|ms"


def apply_sample_suffix(value: str, rate) -> str:
    return f"{value}|@{rate}"


def format_line(name: str, value: str) -> str:
    """Build the ``<name>:<value>`` wire line for one stat."""
    return f"{name}:{value}"
