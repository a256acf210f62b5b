"""Validation utilities for pacing intervals"""

import math
from datetime import timedelta

Interval = float | int | timedelta


class IntervalValidationError(ValueError):
    """Raised when an interval is not a usable duration"""
    pass


def validate_interval(interval: Interval) -> float:
    """
    Normalise an interval to non-negative float seconds.

    Args:
        interval: Seconds as int/float, or a timedelta

    Returns:
        The interval in seconds

    Raises:
        IntervalValidationError: If the interval is negative, not finite or not a duration
    """
    if isinstance(interval, timedelta):
        seconds = interval.total_seconds()
    elif isinstance(interval, bool) or not isinstance(interval, (int, float)):
        raise IntervalValidationError(
            f"interval must be seconds or a timedelta, got {type(interval).__name__}"
        )
    else:
        seconds = float(interval)

    if not math.isfinite(seconds):
        raise IntervalValidationError(f"interval must be finite, got {seconds}")

    if seconds < 0:
        raise IntervalValidationError(f"interval must be non-negative, got {seconds}")

    return seconds
