"""
Utility Functions

This package contains helper functions and utilities used throughout
the application.
"""

from device_validation.utils.helpers import (
    format_number,
    clamp,
    elapsed_ms,
    parse_iso_timestamp,
)

__all__ = [
    "format_number",
    "clamp",
    "elapsed_ms",
    "parse_iso_timestamp",
]
