"""HTTP status code mapping for exceptions.

Exceptions are looked up along their MRO so a subclass inherits the
status of its closest mapped ancestor.
"""

from typing import Dict, Type

from .auth import (
    AuthenticationError,
    IdentityServiceUnavailable,
    InvalidCredentialsError,
    InvalidPrincipalError,
    MissingCredentialsError,
)
from .base import GatewayError
from .domain import (
    AccessDeniedError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    InvalidRequestError,
    PathResolutionError,
    ResourceNotFoundError,
    StorageOperationError,
    UploadConflictError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    InvalidRequestError: 400,

    # 401 Unauthorized
    AuthenticationError: 401,
    MissingCredentialsError: 401,
    InvalidCredentialsError: 401,
    InvalidPrincipalError: 401,
    IdentityServiceUnavailable: 401,

    # 403 Forbidden
    AuthorizationError: 403,
    AccessDeniedError: 403,
    PathResolutionError: 403,

    # 404 Not Found
    ResourceNotFoundError: 404,

    # 409 Conflict
    ConflictError: 409,

    # 502 Bad Gateway (clients rely on this for "nothing was stored")
    UploadConflictError: 502,

    # 500 Internal Server Error
    StorageOperationError: 500,
    ConfigurationError: 500,

    # Default for GatewayError
    GatewayError: 500,
}


class HttpStatusMapper:
    """Resolves status codes for exceptions and caches the result per type."""

    def __init__(self, mapping: Dict[Type[Exception], int] = None):
        self._mapping = mapping or HTTP_STATUS_MAP
        self._cache: Dict[Type[Exception], int] = {}

    def get_status_code(self, exception: Exception) -> int:
        """Get HTTP status code for exception.

        Args:
            exception: The exception instance

        Returns:
            HTTP status code (500 when no ancestor is mapped)
        """
        exception_type = type(exception)
        if exception_type in self._cache:
            return self._cache[exception_type]

        status_code = 500
        for base_class in exception_type.__mro__:
            if base_class in self._mapping:
                status_code = self._mapping[base_class]
                break

        self._cache[exception_type] = status_code
        return status_code


_mapper = HttpStatusMapper()


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the module mapper."""
    return _mapper.get_status_code(exception)
