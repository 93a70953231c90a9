"""
System Endpoints

Unauthenticated endpoints: health check and the root redirect to the
interactive API documentation.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from device_validation.models.schemas import HealthResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Redirect to the API documentation."""
    return RedirectResponse(url="/docs")


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc).isoformat())
