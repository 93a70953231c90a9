"""
Pydantic Request/Response Models

This module defines the Pydantic schemas for the validation API and for the
identity record returned by the identity-graph provider. The identity record
is opaque beyond the handful of fields the scoring algorithms read, so its
models keep any unknown upstream fields.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any, Union


# ============================================================================
# IDENTITY RECORD SCHEMAS (upstream provider)
# ============================================================================

class Email(BaseModel):
    """An email address linked to an identity."""

    quality_level: Optional[Union[int, float]] = Field(
        default=None,
        alias="qualityLevel",
        description="Provider quality grade; missing means 0"
    )
    update_date: Optional[str] = Field(
        default=None,
        alias="updateDate",
        description="Last time the provider saw this email"
    )
    sha256: Optional[str] = Field(
        default=None,
        description="SHA-256 digest of the normalized address"
    )

    class Config:
        extra = "allow"
        populate_by_name = True


class IpSignal(BaseModel):
    """
    IP activity metrics. Observed only, they carry no score weight, so
    values are reported as the provider sent them.
    """

    frequency: Optional[Any] = None
    intensity: Optional[Any] = None
    strength: Optional[Any] = None

    class Config:
        extra = "allow"


class Identity(BaseModel):
    """A single identity matched to the device."""

    # Kept as sent: only a JSON boolean true counts as validated
    validated: Optional[Any] = Field(
        default=None,
        description="True when the device is present in the National Consumer Database"
    )
    emails: Optional[List[Email]] = None
    ips: Optional[List[Optional[IpSignal]]] = None

    class Config:
        extra = "allow"


class IdentityRecord(BaseModel):
    """Identity lookup result for one device."""

    input: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Echo of the lookup input (e.g. {'deviceId': ...})"
    )
    identities: Optional[List[Optional[Identity]]] = Field(
        default=None,
        description="Matched identities, best match first"
    )

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "input": {"deviceId": "c925255d-3ab1-4e56-92cd-645ece08cdf9"},
                "identities": [
                    {
                        "validated": True,
                        "emails": [{"qualityLevel": 3}, {"qualityLevel": 1}],
                        "ips": [{"frequency": 12, "intensity": 4, "strength": 0.8}]
                    }
                ]
            }
        }

    @property
    def first_identity(self) -> Optional[Identity]:
        """The best match, or None when there is no identity data."""
        if not self.identities:
            return None
        return self.identities[0]

    def to_raw(self) -> Dict[str, Any]:
        """Dump back to the provider's wire shape."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# ============================================================================
# VALIDATION SCHEMAS
# ============================================================================

class ValidationRequest(BaseModel):
    """A device validation request that passed input checks."""

    device_id: str = Field(
        ...,
        min_length=1,
        description="Unique device identifier"
    )
    ip_address: str = Field(
        ...,
        min_length=1,
        description="IP address of the device"
    )
    session_timestamp: str = Field(
        ...,
        min_length=1,
        description="ISO 8601 timestamp of the session"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "device_id": "c925255d-3ab1-4e56-92cd-645ece08cdf9",
                "ip_address": "192.168.1.100",
                "session_timestamp": "2025-11-19T15:30:00Z"
            }
        }


class ValidationResponse(BaseModel):
    """Validation verdict with the evidence behind it."""

    device_id: str = Field(
        ...,
        description="The device ID that was validated"
    )
    validated: bool = Field(
        ...,
        description="Whether the device passed validation (confidence >= threshold)"
    )
    confidence_score: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Confidence score between 0 and 1, rounded to 3 decimals"
    )
    signals: List[str] = Field(
        ...,
        min_length=1,
        description="Signals explaining what contributed to the score, in evaluation order"
    )
    response_time_ms: int = Field(
        ...,
        ge=0,
        description="Time taken to process the request in milliseconds"
    )
    identity_response: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Raw identity record (debug mode only, never in production)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "device_id": "c925255d-3ab1-4e56-92cd-645ece08cdf9",
                "validated": True,
                "confidence_score": 0.9,
                "signals": [
                    "Device validated in National Consumer Database",
                    "2 email(s) associated",
                    "1 high-quality email(s)",
                    "IP data available",
                    "IP frequency: 12",
                    "IP intensity: 4",
                    "IP strength: 0.8",
                    "Confidence score (0.90) exceeds threshold (0.85)"
                ],
                "response_time_ms": 245
            }
        }


class TemplatesResponse(BaseModel):
    """Scoring templates known to the service."""

    supported_templates: List[str] = Field(
        ...,
        description="List of supported template IDs"
    )
    current_template: str = Field(
        ...,
        description="Currently configured template ID"
    )


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str


# ============================================================================
# ERROR SCHEMAS
# ============================================================================

class ErrorResponse(BaseModel):
    """Bad request, authentication and configuration errors."""

    error: str

    class Config:
        json_schema_extra = {
            "example": {"error": "Missing required field: device_id"}
        }


class GatewayErrorResponse(BaseModel):
    """The identity provider failed."""

    error: str
    message: str
    device_id: str

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Failed to validate device",
                "message": "Identity API error (503): Service Unavailable",
                "device_id": "c925255d-3ab1-4e56-92cd-645ece08cdf9"
            }
        }


class InternalErrorResponse(BaseModel):
    """Unexpected server failure."""

    error: str
    message: str
    response_time_ms: Optional[int] = None
