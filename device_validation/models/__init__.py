"""
Pydantic Models and Schemas

This package contains Pydantic models for request/response validation
and for the upstream identity record.
"""

from device_validation.models.schemas import (
    Email,
    IpSignal,
    Identity,
    IdentityRecord,
    ValidationRequest,
    ValidationResponse,
    TemplatesResponse,
    HealthResponse,
    ErrorResponse,
    GatewayErrorResponse,
    InternalErrorResponse,
)

__all__ = [
    "Email",
    "IpSignal",
    "Identity",
    "IdentityRecord",
    "ValidationRequest",
    "ValidationResponse",
    "TemplatesResponse",
    "HealthResponse",
    "ErrorResponse",
    "GatewayErrorResponse",
    "InternalErrorResponse",
]
