"""
Tests for Pydantic Schemas

Tests the identity record models (aliases, unknown fields, null entries)
and the response constraints.
"""

import pytest
from pydantic import ValidationError

from device_validation.models.schemas import (
    Email,
    IdentityRecord,
    ValidationRequest,
    ValidationResponse,
)


class TestIdentityRecord:

    def test_camel_case_aliases(self):
        email = Email.model_validate({"qualityLevel": 3, "updateDate": "2025-01-01"})

        assert email.quality_level == 3
        assert email.update_date == "2025-01-01"

    def test_populate_by_name(self):
        assert Email(quality_level=2).quality_level == 2

    def test_unknown_fields_preserved(self):
        payload = {
            "input": {"deviceId": "d"},
            "identities": [{"validated": True, "firstName": "Ada", "emails": [{"qualityLevel": 1, "domain": "x.io"}]}],
            "requestId": "r-1",
        }
        record = IdentityRecord.model_validate(payload)

        assert record.to_raw() == payload

    def test_to_raw_omits_unset_fields(self):
        record = IdentityRecord.model_validate({"identities": [{"validated": False}]})

        assert record.to_raw() == {"identities": [{"validated": False}]}

    def test_first_identity(self, full_identity_record):
        assert full_identity_record.first_identity.validated is True

    @pytest.mark.parametrize("payload", [{}, {"identities": None}, {"identities": []}, {"identities": [None]}])
    def test_first_identity_absent(self, payload):
        assert IdentityRecord.model_validate(payload).first_identity is None

    def test_null_ip_entries_allowed(self):
        record = IdentityRecord.model_validate({"identities": [{"ips": [None, {"strength": 0.5}]}]})

        assert record.first_identity.ips[0] is None
        assert record.first_identity.ips[1].strength == 0.5

    @pytest.mark.parametrize("flag", ["true", 1, "maybe"])
    def test_validated_flag_not_coerced(self, flag):
        record = IdentityRecord.model_validate({"identities": [{"validated": flag}]})

        assert record.first_identity.validated == flag
        assert record.first_identity.validated is not True

    def test_loose_ip_metrics_accepted(self):
        record = IdentityRecord.model_validate({"identities": [{"ips": [{"frequency": "high"}]}]})

        assert record.first_identity.ips[0].frequency == "high"

    def test_fractional_quality_level_accepted(self):
        assert Email.model_validate({"qualityLevel": 2.5}).quality_level == 2.5

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValidationError):
            IdentityRecord.model_validate({"identities": "not-a-list"})


class TestValidationRequest:

    def test_empty_field_rejected(self):
        with pytest.raises(ValidationError):
            ValidationRequest(device_id="", ip_address="1.2.3.4", session_timestamp="2025-11-19T15:30:00Z")


class TestValidationResponse:

    def make(self, **overrides):
        values = {
            "device_id": "d",
            "validated": False,
            "confidence_score": 0.5,
            "signals": ["Device not found in National Consumer Database"],
            "response_time_ms": 12,
        }
        values.update(overrides)
        return ValidationResponse(**values)

    def test_valid_response(self):
        response = self.make()

        assert response.identity_response is None
        assert "identity_response" not in response.model_dump(exclude_none=True)

    @pytest.mark.parametrize("score", [-0.1, 1.01])
    def test_score_out_of_range(self, score):
        with pytest.raises(ValidationError):
            self.make(confidence_score=score)

    def test_signals_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            self.make(signals=[])

    def test_negative_response_time(self):
        with pytest.raises(ValidationError):
            self.make(response_time_ms=-1)
