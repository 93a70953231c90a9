"""
Core module for the Device Validation API.
"""

from .constants import (
    VALIDATION_THRESHOLD,
    SCORE_MIN,
    SCORE_MAX,
    DEFAULT_TEMPLATE_ID,
    DEFAULT_TEMPLATE_NAME,
)

__all__ = [
    'VALIDATION_THRESHOLD',
    'SCORE_MIN',
    'SCORE_MAX',
    'DEFAULT_TEMPLATE_ID',
    'DEFAULT_TEMPLATE_NAME',
]
