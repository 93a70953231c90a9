"""
Validation Pipeline

Orchestrates one device validation end-to-end:

1. Input validation      -> InputError (400)
2. Identity lookup       -> GatewayError (502)
3. Scoring               (never fails)
4. Response assembly     -> ValidationResponse

Any other exception is caught once here and re-raised as InternalError (500)
carrying the elapsed time. No stage is retried.
"""

import logging
import time
from typing import Any, Dict, Optional

from device_validation.core.constants import SCORE_DECIMALS
from device_validation.core.exceptions import (
    GatewayError,
    IdentityServiceError,
    InputError,
    InternalError,
    ServiceError,
)
from device_validation.models.schemas import ValidationRequest, ValidationResponse
from device_validation.services.identity_client import IdentityClient
from device_validation.services.scoring import ScoringEngine
from device_validation.utils.helpers import elapsed_ms, parse_iso_timestamp

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("device_id", "ip_address", "session_timestamp")


def parse_validation_request(payload: Any) -> ValidationRequest:
    """
    Check the raw request body and build a ValidationRequest.

    Fields are checked in order and the first failure wins.

    Raises:
        InputError: with a field-specific message
    """
    if not isinstance(payload, dict):
        raise InputError("Request body must be a JSON object")

    for name in REQUIRED_FIELDS:
        value = payload.get(name)
        if value is None or value == "":
            raise InputError(f"Missing required field: {name}")
        if not isinstance(value, str):
            raise InputError(f"Invalid field type: {name} must be a string")

    if parse_iso_timestamp(payload["session_timestamp"]) is None:
        raise InputError("Invalid session_timestamp format. Must be ISO 8601.")

    return ValidationRequest(
        device_id=payload["device_id"],
        ip_address=payload["ip_address"],
        session_timestamp=payload["session_timestamp"],
    )


class ValidationPipeline:
    """Validate a device against the identity graph and score the result."""

    def __init__(
        self,
        client: IdentityClient,
        engine: ScoringEngine,
        template_id: str,
        include_identity_response: bool = False,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.engine = engine
        self.template_id = template_id
        self.include_identity_response = include_identity_response
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings, client: IdentityClient, engine: ScoringEngine) -> "ValidationPipeline":
        return cls(
            client=client,
            engine=engine,
            template_id=settings.TEMPLATE_ID,
            include_identity_response=settings.include_identity_response,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        )

    def validate(self, payload: Dict[str, Any]) -> ValidationResponse:
        """
        Run one validation request.

        Args:
            payload: Decoded JSON request body

        Returns:
            ValidationResponse on success

        Raises:
            InputError: the request body failed validation
            GatewayError: the identity lookup failed
            InternalError: anything unexpected
        """
        start = time.perf_counter()

        try:
            request = parse_validation_request(payload)

            try:
                record = self.client.get_identity(
                    request.device_id, template_id=self.template_id, timeout=self.timeout
                )
            except IdentityServiceError as e:
                logger.warning(f"Identity lookup failed for device {request.device_id}: {e}")
                raise GatewayError(str(e), device_id=request.device_id) from e

            result = self.engine.calculate_score(record, self.template_id)

            response = ValidationResponse(
                device_id=request.device_id,
                validated=result.validated,
                confidence_score=round(result.confidence_score, SCORE_DECIMALS),
                signals=result.signals,
                response_time_ms=elapsed_ms(start),
                identity_response=record.to_raw() if self.include_identity_response else None,
            )

        except ServiceError:
            raise
        except Exception as e:
            logger.exception("Validation error")
            raise InternalError(str(e) or e.__class__.__name__, response_time_ms=elapsed_ms(start)) from e

        logger.info(
            f"Validated device {response.device_id}: validated={response.validated} "
            f"score={response.confidence_score} time={response.response_time_ms}ms"
        )
        return response
