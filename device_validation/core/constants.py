"""
Device Validation API - Global Constants

This file contains the scoring constants shared by the scoring engine,
the configuration defaults and the tests.
"""

# Decision threshold
# A device passes validation when its confidence score reaches this value
VALIDATION_THRESHOLD = 0.85

# Score range
SCORE_MIN = 0.0
SCORE_MAX = 1.0

# Reference scoring template
DEFAULT_TEMPLATE_ID = "223323710"
DEFAULT_TEMPLATE_NAME = "aadz_test_1"

# Signal weights for the reference template
VALIDATED_IDENTITY_WEIGHT = 0.7
EMAIL_PRESENT_WEIGHT = 0.1
HIGH_QUALITY_EMAIL_WEIGHT = 0.1
HIGH_QUALITY_EMAIL_LEVEL = 2

# Basic fallback scores (used when a template has no registered algorithm)
BASIC_VALIDATED_SCORE = 0.7
BASIC_NOT_VALIDATED_SCORE = 0.2

# Identity provider
DEFAULT_IDENTITY_API_ORIGIN = "https://api.audienceacuity.com"
IDENTITY_LOOKUP_PATH = "/v2/identities/byDevice"
DEFAULT_UPSTREAM_TIMEOUT_SECONDS = 10.0

# Response formatting
SCORE_DECIMALS = 3
