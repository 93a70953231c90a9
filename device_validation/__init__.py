"""
Device Validation API

Validates device identifiers against an identity-graph provider and
reports a confidence score with the signals behind it.
"""

__version__ = "1.0.0"
