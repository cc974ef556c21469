"""Exceptions module for neo-file-gateway.

This module provides the complete exception hierarchy, organized by
authentication concerns and domain concerns.
"""

from .base import (
    GatewayError,
    get_http_status_code,
    create_error_response,
)

from .auth import (
    AuthenticationError,
    MissingCredentialsError,
    InvalidCredentialsError,
    InvalidPrincipalError,
    IdentityServiceUnavailable,
)

from .domain import (
    ConfigurationError,
    InvalidRequestError,
    AuthorizationError,
    AccessDeniedError,
    PathResolutionError,
    ResourceNotFoundError,
    ConflictError,
    UploadConflictError,
    StorageOperationError,
)

from .http_mapping import HTTP_STATUS_MAP, HttpStatusMapper

__all__ = [
    # Base
    "GatewayError",
    "get_http_status_code",
    "create_error_response",

    # Authentication
    "AuthenticationError",
    "MissingCredentialsError",
    "InvalidCredentialsError",
    "InvalidPrincipalError",
    "IdentityServiceUnavailable",

    # Domain
    "ConfigurationError",
    "InvalidRequestError",
    "AuthorizationError",
    "AccessDeniedError",
    "PathResolutionError",
    "ResourceNotFoundError",
    "ConflictError",
    "UploadConflictError",
    "StorageOperationError",

    # Mapping
    "HTTP_STATUS_MAP",
    "HttpStatusMapper",
]
