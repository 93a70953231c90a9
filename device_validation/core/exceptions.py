"""
Error Taxonomy

Two families of exceptions live here:

- ServiceError and its subclasses are terminal states of a request. Each one
  knows its HTTP status and the JSON body the caller receives, and is
  rendered by a single exception handler registered in main.py.
- IdentityServiceError and its subclasses are raised by the identity client.
  The validation pipeline converts them into a GatewayError.

No error kind is retried.
"""

from typing import Any, Dict, Optional


# =============================================================================
# SERVICE ERRORS (rendered as JSON responses)
# =============================================================================

class ServiceError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class InputError(ServiceError):
    """Missing or malformed request field."""

    status_code = 400


class AuthenticationError(ServiceError):
    """Missing or wrong API key."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized: Invalid or missing API key"):
        super().__init__(message)


class ConfigurationError(ServiceError):
    """The server is missing configuration it needs to serve the request."""

    status_code = 500


class GatewayError(ServiceError):
    """The identity provider could not produce a record for the device."""

    status_code = 502
    error = "Failed to validate device"

    def __init__(self, message: str, device_id: str):
        self.device_id = device_id
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {
            "error": self.error,
            "message": self.message,
            "device_id": self.device_id,
        }


class InternalError(ServiceError):
    """Unexpected failure caught at the pipeline boundary."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str, response_time_ms: Optional[int] = None):
        self.response_time_ms = response_time_ms
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error, "message": self.message}
        if self.response_time_ms is not None:
            body["response_time_ms"] = self.response_time_ms
        return body


# =============================================================================
# IDENTITY CLIENT ERRORS
# =============================================================================

class IdentityServiceError(Exception):
    """Base class for failures talking to the identity provider."""


class UpstreamError(IdentityServiceError):
    """The identity provider answered with a non-success status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Identity API error ({status}): {body}")


class TransportError(IdentityServiceError):
    """The identity provider could not be reached."""

    def __init__(self, cause: BaseException, message: Optional[str] = None):
        self.cause = cause
        super().__init__(message or f"Failed to reach identity API: {cause}")


class UpstreamTimeoutError(TransportError):
    """The identity lookup did not finish before its deadline."""

    def __init__(self, cause: BaseException, timeout: float):
        self.timeout = timeout
        super().__init__(cause, f"Identity API request timed out after {timeout:g}s")


class IdentityConfigurationError(Exception):
    """Identity provider credentials are not configured."""
