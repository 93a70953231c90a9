"""
Shared test fixtures for the Device Validation API.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from device_validation.config import Settings
from device_validation.models.schemas import IdentityRecord
from device_validation.services.identity_client import IdentityClient
from device_validation.services.scoring import ScoringEngine


DEVICE_ID = "c925255d-3ab1-4e56-92cd-645ece08cdf9"


# ============================================================================
# Identity records
# ============================================================================

@pytest.fixture
def full_identity_payload():
    """One validated identity, 2 emails (1 high-quality), one IP with all metrics."""
    return {
        "input": {"deviceId": DEVICE_ID},
        "identities": [
            {
                "validated": True,
                "emails": [
                    {"qualityLevel": 3, "sha256": "abc123"},
                    {"qualityLevel": 1},
                ],
                "ips": [
                    {"frequency": 12, "intensity": 4, "strength": 0.8},
                ],
            }
        ],
    }


@pytest.fixture
def full_identity_record(full_identity_payload):
    return IdentityRecord.model_validate(full_identity_payload)


@pytest.fixture
def empty_identity_record():
    return IdentityRecord.model_validate({"input": {"deviceId": DEVICE_ID}, "identities": []})


@pytest.fixture
def valid_request_body():
    return {
        "device_id": DEVICE_ID,
        "ip_address": "192.168.1.100",
        "session_timestamp": "2025-11-19T15:30:00Z",
    }


# ============================================================================
# Collaborators
# ============================================================================

@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        API_KEY="test-api-key",
        IDENTITY_KEY_ID_DEV="dev-key",
        IDENTITY_SECRET_DEV="dev-secret",
    )


@pytest.fixture
def scoring_engine():
    return ScoringEngine.with_defaults()


@pytest.fixture
def mock_identity_client(full_identity_record):
    """Identity client whose lookups return the full identity record."""
    client = MagicMock(spec=IdentityClient)
    client.get_identity.return_value = full_identity_record
    return client
