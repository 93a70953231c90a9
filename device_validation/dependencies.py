"""
FastAPI Dependency Injection

Long-lived collaborators (scoring engine, identity client, pipeline) are
built once and handed to the routes through Depends, so tests can replace
any of them with app.dependency_overrides.
"""

import logging
import secrets
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from device_validation.config import Settings, settings
from device_validation.core.exceptions import AuthenticationError, ConfigurationError
from device_validation.services.identity_client import IdentityClient
from device_validation.services.pipeline import ValidationPipeline
from device_validation.services.scoring import ScoringEngine

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """
    Get application settings.

    Can be overridden in tests:
        app.dependency_overrides[get_settings] = lambda: Settings(API_KEY="test")
    """
    return settings


@lru_cache(maxsize=1)
def get_scoring_engine() -> ScoringEngine:
    """Create and cache the process-wide scoring engine."""
    engine = ScoringEngine.with_defaults(threshold=settings.VALIDATION_THRESHOLD)
    logger.info(f"Scoring engine ready with templates {engine.get_supported_templates()}")
    return engine


@lru_cache(maxsize=1)
def get_identity_client() -> IdentityClient:
    """
    Create and cache the identity client (one HTTP session per process).

    The pipeline passes its own template id on every lookup, so the template
    sent upstream always matches the one used for scoring.
    """
    return IdentityClient.from_settings(settings)


def get_pipeline(
    engine: ScoringEngine = Depends(get_scoring_engine),
    client: IdentityClient = Depends(get_identity_client),
    app_settings: Settings = Depends(get_settings),
) -> ValidationPipeline:
    return ValidationPipeline.from_settings(app_settings, client=client, engine=engine)


def require_api_key(
    x_api_key: Optional[str] = Header(default=None),
    app_settings: Settings = Depends(get_settings),
) -> None:
    """Static shared-secret check on the X-API-Key header."""
    if not app_settings.API_KEY:
        raise ConfigurationError("Server configuration error: API_KEY not set")

    if not x_api_key or not secrets.compare_digest(
        x_api_key.encode("utf-8"), app_settings.API_KEY.encode("utf-8")
    ):
        raise AuthenticationError()
