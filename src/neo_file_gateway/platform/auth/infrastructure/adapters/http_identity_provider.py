"""HTTP identity provider adapter.

Delegates credential verification to the identity service over HTTP.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .....core.exceptions import (
    IdentityServiceUnavailable,
    InvalidCredentialsError,
    InvalidPrincipalError,
)
from .....core.value_objects import Role
from ...core.entities.principal import Principal

logger = logging.getLogger(__name__)

VERIFY_TOKEN_PATH = "/v1/auth/verify/token"


class IdentityEnvelope(BaseModel):
    """Response envelope returned by the identity service."""
    model_config = ConfigDict(extra="ignore")

    status: int
    message: Optional[str] = None
    data: Optional[Any] = None


class RolePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Role


class PrincipalPayload(BaseModel):
    """Principal as described by the identity service."""
    model_config = ConfigDict(extra="ignore")

    uuid: str = Field(..., min_length=1)
    role: RolePayload


class HttpIdentityProvider:
    """Identity provider backed by the identity service's verify endpoint.

    The credential is forwarded verbatim as the Authorization header. Any
    answer other than a 200 envelope carrying a valid principal is a
    failure.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def authenticate(self, credential: str) -> Principal:
        """Verify a credential and return the principal it identifies.

        Raises:
            IdentityServiceUnavailable: Transport failure, timeout or a body
                that is not a response envelope
            InvalidCredentialsError: The service rejected the credential
            InvalidPrincipalError: The principal payload is malformed
        """
        try:
            response = await self._client.post(
                VERIFY_TOKEN_PATH,
                headers={"Authorization": credential},
            )
        except httpx.TimeoutException as e:
            raise IdentityServiceUnavailable(reason=f"timeout after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise IdentityServiceUnavailable(reason=f"{type(e).__name__}: {e}") from e

        try:
            envelope = IdentityEnvelope.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise IdentityServiceUnavailable(
                reason=f"malformed response (HTTP {response.status_code})"
            ) from e

        if envelope.status != 200:
            raise InvalidCredentialsError(reason=envelope.message or f"status {envelope.status}")

        try:
            payload = PrincipalPayload.model_validate(envelope.data)
            principal = Principal.create(payload.uuid, payload.role.name)
        except (ValidationError, ValueError) as e:
            raise InvalidPrincipalError(reason=f"invalid principal payload: {e}") from e

        logger.debug(f"Identity service verified principal {principal}")
        return principal

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
