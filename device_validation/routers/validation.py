"""
Device Validation Endpoints

This module handles the authenticated endpoints: validating a device
against the identity graph and listing the supported scoring templates.
Both require the X-API-Key header.
"""

from fastapi import APIRouter, Body, Depends
from typing import Any

from device_validation.config import Settings
from device_validation.dependencies import (
    get_pipeline,
    get_scoring_engine,
    get_settings,
    require_api_key,
)
from device_validation.models.schemas import (
    ErrorResponse,
    GatewayErrorResponse,
    InternalErrorResponse,
    TemplatesResponse,
    ValidationResponse,
)
from device_validation.services.pipeline import ValidationPipeline
from device_validation.services.scoring import ScoringEngine

router = APIRouter(dependencies=[Depends(require_api_key)])

VALIDATE_EXAMPLE = {
    "device_id": "c925255d-3ab1-4e56-92cd-645ece08cdf9",
    "ip_address": "192.168.1.100",
    "session_timestamp": "2025-11-19T15:30:00Z",
}

AUTH_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Unauthorized - invalid or missing API key"},
}


@router.post(
    "/validate",
    response_model=ValidationResponse,
    response_model_exclude_none=True,
    responses={
        **AUTH_RESPONSES,
        400: {"model": ErrorResponse, "description": "Bad request - missing or invalid parameters"},
        500: {"model": InternalErrorResponse, "description": "Internal server error"},
        502: {"model": GatewayErrorResponse, "description": "Bad Gateway - error communicating with upstream service"},
    },
)
def validate_device(
    payload: Any = Body(
        default=None,
        examples=[VALIDATE_EXAMPLE],
    ),
    pipeline: ValidationPipeline = Depends(get_pipeline),
):
    """
    Validate a device ID against the identity graph and return a confidence score.

    Example request:
    {
        "device_id": "c925255d-3ab1-4e56-92cd-645ece08cdf9",
        "ip_address": "192.168.1.100",
        "session_timestamp": "2025-11-19T15:30:00Z"
    }

    The device passes when its confidence score reaches the configured
    threshold (0.85 by default). Signals list the evidence in evaluation order.
    """
    return pipeline.validate(payload if payload is not None else {})


@router.get("/templates", response_model=TemplatesResponse, responses=AUTH_RESPONSES)
def list_templates(
    engine: ScoringEngine = Depends(get_scoring_engine),
    app_settings: Settings = Depends(get_settings),
):
    """List all supported scoring templates and the currently configured template."""
    return TemplatesResponse(
        supported_templates=engine.get_supported_templates(),
        current_template=app_settings.TEMPLATE_ID,
    )
