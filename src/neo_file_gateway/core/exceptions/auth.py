"""Authentication-specific exceptions for neo-file-gateway."""

from typing import Optional

from .base import GatewayError


class AuthenticationError(GatewayError):
    """Base exception for authentication errors."""
    pass


class MissingCredentialsError(AuthenticationError):
    """Raised when neither the header nor the query carries a bearer token."""

    def __init__(self, message: str = "No Bearer token provided"):
        super().__init__(message, error_code="MISSING_CREDENTIALS")


class InvalidCredentialsError(AuthenticationError):
    """Raised when the identity service rejects a credential."""

    def __init__(
        self,
        message: str = "Invalid Bearer token provided",
        reason: Optional[str] = None,
    ):
        super().__init__(
            message,
            error_code="INVALID_CREDENTIALS",
            details={"reason": reason} if reason else None,
        )
        self.reason = reason


class InvalidPrincipalError(InvalidCredentialsError):
    """Raised when the identity service answers with a malformed principal."""
    pass


class IdentityServiceUnavailable(AuthenticationError):
    """Raised when the identity service is unreachable, times out or
    returns something that is not a response envelope."""

    def __init__(
        self,
        message: str = "Identity service unavailable",
        reason: Optional[str] = None,
    ):
        super().__init__(
            message,
            error_code="IDENTITY_SERVICE_UNAVAILABLE",
            details={"reason": reason} if reason else None,
        )
        self.reason = reason
