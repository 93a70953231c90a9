"""
Tests for Configuration Module

Tests for the Settings class including:
- Default value loading
- Environment variable overrides
- Environment-dependent credentials and debug echo
- Validation of invalid values
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from device_validation.config import Settings


def load_settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestDefaultValues:
    """Test that default values load correctly."""

    def test_default_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
            assert settings.ENVIRONMENT == "development"
            assert settings.is_production is False

    def test_default_template_id(self):
        with patch.dict(os.environ, {}, clear=True):
            assert load_settings().TEMPLATE_ID == "223323710"

    def test_default_threshold(self):
        with patch.dict(os.environ, {}, clear=True):
            assert load_settings().VALIDATION_THRESHOLD == 0.85

    def test_default_origin(self):
        with patch.dict(os.environ, {}, clear=True):
            assert load_settings().IDENTITY_API_ORIGIN == "https://api.audienceacuity.com"

    def test_default_timeout(self):
        with patch.dict(os.environ, {}, clear=True):
            assert load_settings().UPSTREAM_TIMEOUT_SECONDS == 10.0

    def test_default_api_settings(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
            assert settings.API_PREFIX == "/v1"
            assert settings.API_KEY is None
            assert settings.CORS_ORIGINS == ["*"]

    def test_debug_echo_off_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
            assert settings.INCLUDE_IDENTITY_RESPONSE is False
            assert settings.include_identity_response is False


class TestEnvironmentOverrides:
    """Test that environment variables override defaults."""

    def test_template_and_threshold(self):
        env = {"TEMPLATE_ID": "999", "VALIDATION_THRESHOLD": "0.5"}
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()
            assert settings.TEMPLATE_ID == "999"
            assert settings.VALIDATION_THRESHOLD == 0.5

    def test_boolean_flag(self):
        with patch.dict(os.environ, {"INCLUDE_IDENTITY_RESPONSE": "true"}, clear=True):
            assert load_settings().INCLUDE_IDENTITY_RESPONSE is True

    def test_cors_origins_comma_separated(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings(CORS_ORIGINS="http://a.example, http://b.example")
            assert settings.CORS_ORIGINS == ["http://a.example", "http://b.example"]

    def test_case_sensitive(self):
        with patch.dict(os.environ, {"template_id": "lowercase"}, clear=True):
            assert load_settings().TEMPLATE_ID == "223323710"


class TestEnvironmentDependentValues:

    def test_production_detection_is_case_insensitive(self):
        assert load_settings(ENVIRONMENT="Production").is_production is True

    def test_dev_credentials_outside_production(self):
        settings = load_settings(
            IDENTITY_KEY_ID_DEV="dev", IDENTITY_SECRET_DEV="dev-s",
            IDENTITY_KEY_ID_PROD="prod", IDENTITY_SECRET_PROD="prod-s",
        )
        assert settings.identity_key_id == "dev"
        assert settings.identity_secret == "dev-s"

    def test_prod_credentials_in_production(self):
        settings = load_settings(
            ENVIRONMENT="production",
            IDENTITY_KEY_ID_DEV="dev", IDENTITY_SECRET_DEV="dev-s",
            IDENTITY_KEY_ID_PROD="prod", IDENTITY_SECRET_PROD="prod-s",
        )
        assert settings.identity_key_id == "prod"
        assert settings.identity_secret == "prod-s"

    def test_debug_echo_honored_in_development(self):
        assert load_settings(INCLUDE_IDENTITY_RESPONSE=True).include_identity_response is True

    def test_debug_echo_ignored_in_production(self):
        settings = load_settings(ENVIRONMENT="production", INCLUDE_IDENTITY_RESPONSE=True)
        assert settings.include_identity_response is False


class TestValidation:
    """Test that invalid values are rejected."""

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_out_of_range(self, threshold):
        with pytest.raises(ValidationError):
            load_settings(VALIDATION_THRESHOLD=threshold)

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValidationError):
            load_settings(UPSTREAM_TIMEOUT_SECONDS=timeout)
