"""
Business Logic Services

This package contains the identity-graph client, the template-keyed
scoring engine and the validation pipeline that ties them together.
"""

from device_validation.services.identity_client import IdentityClient, build_auth_token
from device_validation.services.scoring import (
    ScoringAlgorithm,
    ScoringEngine,
    ScoringResult,
    AadzTest1Algorithm,
    basic_validation,
)
from device_validation.services.pipeline import ValidationPipeline, parse_validation_request

__all__ = [
    "IdentityClient",
    "build_auth_token",
    "ScoringAlgorithm",
    "ScoringEngine",
    "ScoringResult",
    "AadzTest1Algorithm",
    "basic_validation",
    "ValidationPipeline",
    "parse_validation_request",
]
