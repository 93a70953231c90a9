"""
Identity Graph Client

Looks a device up in the identity-graph provider.

Authentication is a custom header, not a signed request and not a Bearer
token:

    timestamp = current Unix time in milliseconds, as a string
    digest    = md5(timestamp + secret), lowercase hex
    header    = key_id + timestamp + digest

The client makes exactly one request per lookup. Retry policy, if any,
belongs to the caller.
"""

import hashlib
import logging
import time
from typing import Optional

import requests
from pydantic import ValidationError

from device_validation.core.constants import IDENTITY_LOOKUP_PATH
from device_validation.core.exceptions import (
    IdentityConfigurationError,
    TransportError,
    UpstreamError,
    UpstreamTimeoutError,
)
from device_validation.models.schemas import IdentityRecord

logger = logging.getLogger(__name__)


def build_auth_token(key_id: str, secret: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Build the Authorization header value.

    Args:
        key_id: Provider key identifier
        secret: Shared secret paired with key_id
        timestamp_ms: Unix time in milliseconds (defaults to now)

    Returns:
        key_id + timestamp + md5(timestamp + secret)
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    timestamp = str(timestamp_ms)
    digest = hashlib.md5((timestamp + secret).encode("utf-8")).hexdigest()
    return f"{key_id}{timestamp}{digest}"


class IdentityClient:
    """Authenticated reader for the identity-graph provider."""

    def __init__(
        self,
        key_id: str,
        secret: str,
        origin: str,
        template_id: str,
        timeout: float,
        session: Optional[requests.Session] = None,
    ):
        self.key_id = key_id
        self.secret = secret
        self.origin = origin.rstrip("/")
        self.template_id = template_id
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "IdentityClient":
        return cls(
            key_id=settings.identity_key_id,
            secret=settings.identity_secret,
            origin=settings.IDENTITY_API_ORIGIN,
            template_id=settings.TEMPLATE_ID,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        )

    @property
    def lookup_url(self) -> str:
        return f"{self.origin}{IDENTITY_LOOKUP_PATH}"

    def get_identity(
        self,
        device_id: str,
        template_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> IdentityRecord:
        """
        Fetch the identity record for a device.

        Args:
            device_id: Device identifier to look up
            template_id: Template sent upstream (defaults to the client template)
            timeout: Deadline in seconds (defaults to the client timeout)

        Returns:
            Parsed identity record

        Raises:
            IdentityConfigurationError: credentials are not configured
            UpstreamError: the provider answered with a non-success status
                or a body that is not an identity record
            UpstreamTimeoutError: the deadline expired
            TransportError: any other network failure
        """
        if not self.key_id or not self.secret:
            raise IdentityConfigurationError("Identity API credentials not configured")

        deadline = self.timeout if timeout is None else timeout
        headers = {
            "Content-Type": "application/json",
            "Authorization": build_auth_token(self.key_id, self.secret),
        }
        params = {"device": device_id, "template": template_id or self.template_id}

        try:
            response = self.session.get(
                self.lookup_url,
                params=params,
                headers=headers,
                timeout=deadline,
            )
        except requests.Timeout as e:
            logger.warning(f"Identity lookup for {device_id} timed out after {deadline}s")
            raise UpstreamTimeoutError(e, deadline) from e
        except requests.RequestException as e:
            logger.warning(f"Identity lookup for {device_id} failed: {e}")
            raise TransportError(e) from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                f"Identity lookup for {device_id} returned HTTP {response.status_code}"
            )
            raise UpstreamError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(response.status_code, f"Invalid JSON response: {e}") from e

        try:
            return IdentityRecord.model_validate(payload)
        except ValidationError as e:
            raise UpstreamError(response.status_code, f"Unexpected identity record shape: {e}") from e

    def close(self) -> None:
        self.session.close()
