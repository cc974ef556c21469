"""Request authentication service."""

import logging
from typing import Optional

from .....core.exceptions import (
    AuthenticationError,
    IdentityServiceUnavailable,
    InvalidCredentialsError,
    MissingCredentialsError,
)
from ...core.entities.principal import Principal
from ...core.protocols.identity_provider import IdentityProvider
from .credential_extractor import CredentialChannel, extract_credential

logger = logging.getLogger(__name__)

INVALID_CREDENTIAL_MESSAGES = {
    CredentialChannel.HEADER: "Invalid Bearer token provided by header",
    CredentialChannel.QUERY: "Invalid Bearer token provided by query",
}


class Authenticator:
    """Authenticates requests by delegating to an identity provider.

    Every delegate failure is converted into an AuthenticationError with a
    generic message; delegate details only ever reach the logs.
    """

    def __init__(self, identity_provider: IdentityProvider):
        self._identity_provider = identity_provider

    async def authenticate_request(
        self,
        authorization: Optional[str] = None,
        bearer: Optional[str] = None,
    ) -> Principal:
        """Authenticate a request from its header or query credential.

        Args:
            authorization: Authorization header value
            bearer: `bearer` query parameter value

        Returns:
            The authenticated principal

        Raises:
            MissingCredentialsError: If no credential was supplied
            InvalidCredentialsError: If the credential was rejected
            IdentityServiceUnavailable: If the identity service failed
        """
        credential = extract_credential(authorization, bearer)
        if credential is None:
            raise MissingCredentialsError()

        message = INVALID_CREDENTIAL_MESSAGES[credential.channel]

        try:
            principal = await self._identity_provider.authenticate(credential.value)
        except IdentityServiceUnavailable as e:
            logger.error(f"Identity service failure ({credential.channel.value}): {e.reason or e.message}")
            raise IdentityServiceUnavailable(message, reason=e.reason) from e
        except AuthenticationError as e:
            logger.warning(f"Authentication failed ({credential.channel.value}): {e.message} {e.details}")
            raise InvalidCredentialsError(message) from e
        except Exception as e:
            logger.error(f"Unexpected identity provider error: {e}", exc_info=True)
            raise IdentityServiceUnavailable(message, reason=type(e).__name__) from e

        if not isinstance(principal, Principal):
            logger.warning(f"Identity provider returned {type(principal).__name__} instead of a principal")
            raise InvalidCredentialsError(message)

        logger.debug(f"Authenticated principal {principal}")
        return principal
