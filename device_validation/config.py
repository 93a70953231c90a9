"""
Configuration and Settings

This module contains the application configuration using Pydantic Settings
for environment variable management. Upstream credentials, the scoring
template and the validation threshold are all defined here with defaults
that match the reference deployment.
"""

from typing import List, Optional, Union
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from device_validation.core.constants import (
    DEFAULT_IDENTITY_API_ORIGIN,
    DEFAULT_TEMPLATE_ID,
    DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    VALIDATION_THRESHOLD,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # ============================================================================
    # RUNTIME ENVIRONMENT
    # ============================================================================

    ENVIRONMENT: str = Field(
        default="development",
        description="Deployment environment ('development', 'production', ...)"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)"
    )

    # ============================================================================
    # API SETTINGS
    # ============================================================================

    API_PREFIX: str = Field(
        default="/v1",
        description="Route prefix for the authenticated validation endpoints"
    )

    API_KEY: Optional[str] = Field(
        default=None,
        description="Shared secret expected in the X-API-Key header"
    )

    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins for cross-origin requests"
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse comma-separated string or return list as-is."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # ============================================================================
    # IDENTITY PROVIDER
    # ============================================================================

    IDENTITY_API_ORIGIN: str = Field(
        default=DEFAULT_IDENTITY_API_ORIGIN,
        description="Origin URL of the identity-graph provider"
    )

    IDENTITY_KEY_ID_DEV: str = Field(
        default="",
        description="Key identifier used outside production"
    )

    IDENTITY_SECRET_DEV: str = Field(
        default="",
        description="Shared secret used outside production"
    )

    IDENTITY_KEY_ID_PROD: str = Field(
        default="",
        description="Key identifier used in production"
    )

    IDENTITY_SECRET_PROD: str = Field(
        default="",
        description="Shared secret used in production"
    )

    UPSTREAM_TIMEOUT_SECONDS: float = Field(
        default=DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
        gt=0.0,
        description="Deadline for a single identity lookup, in seconds"
    )

    # ============================================================================
    # SCORING
    # ============================================================================

    TEMPLATE_ID: str = Field(
        default=DEFAULT_TEMPLATE_ID,
        description="Template id sent upstream and used to pick the scoring algorithm"
    )

    VALIDATION_THRESHOLD: float = Field(
        default=VALIDATION_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum confidence score for a device to pass validation"
    )

    INCLUDE_IDENTITY_RESPONSE: bool = Field(
        default=False,
        description="Echo the raw identity record in responses (ignored in production)"
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"

    @property
    def identity_key_id(self) -> str:
        """Key identifier for the current environment."""
        return self.IDENTITY_KEY_ID_PROD if self.is_production else self.IDENTITY_KEY_ID_DEV

    @property
    def identity_secret(self) -> str:
        """Shared secret for the current environment."""
        return self.IDENTITY_SECRET_PROD if self.is_production else self.IDENTITY_SECRET_DEV

    @property
    def include_identity_response(self) -> bool:
        """The debug echo is only honored outside production."""
        return self.INCLUDE_IDENTITY_RESPONSE and not self.is_production


# Global settings instance for import throughout the app
settings = Settings()
