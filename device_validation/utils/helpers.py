"""
Utility Helper Functions

This module contains small helpers used by the scoring engine and the
validation pipeline.
"""

import time
from datetime import datetime
from typing import Optional


def format_number(value: float, decimals: int = 2) -> str:
    """
    Format a number to a specified number of decimal places.

    Args:
        value: Number to format
        decimals: Number of decimal places

    Returns:
        Formatted string
    """
    return f"{value:.{decimals}f}"


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


def elapsed_ms(start: float, now: Optional[float] = None) -> int:
    """
    Milliseconds elapsed since start.

    Args:
        start: Value of time.perf_counter() when timing began
        now: Optional end value (defaults to the current perf_counter)

    Returns:
        Whole milliseconds, never negative
    """
    end = time.perf_counter() if now is None else now
    return max(0, int(round((end - start) * 1000)))


def parse_iso_timestamp(value: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp.

    A trailing 'Z' is accepted as UTC.

    Returns:
        The parsed datetime, or None if the string is not ISO 8601
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
