"""
API Routers

This package contains all FastAPI route handlers for different API endpoints.
"""

from device_validation.routers import system, validation

__all__ = ["system", "validation"]
