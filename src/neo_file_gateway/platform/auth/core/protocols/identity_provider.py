"""Identity provider protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities.principal import Principal


@runtime_checkable
class IdentityProvider(Protocol):
    """Protocol for delegated credential verification.

    Defines ONLY the contract for turning a bearer credential into a
    Principal. Implementations talk to the identity service (or stub it).
    """

    async def authenticate(self, credential: str) -> Principal:
        """Verify credential and return the principal it belongs to.

        Args:
            credential: Bearer credential, forwarded verbatim

        Returns:
            Validated principal

        Raises:
            InvalidCredentialsError: If the identity service rejects the credential
            InvalidPrincipalError: If the returned principal fails schema validation
            IdentityServiceUnavailable: If the service is unreachable or times out
        """
        ...
