"""Domain-specific exceptions for neo-file-gateway.

This module defines the exceptions raised by path resolution, access
evaluation, the file catalog and the mutation operations.
"""

from typing import Any, Dict, Optional

from .base import GatewayError


# Configuration Errors
class ConfigurationError(GatewayError):
    """Raised when there's a configuration issue."""
    pass


# Request Errors
class InvalidRequestError(GatewayError):
    """Raised when request parameters are missing or malformed."""
    pass


# Authorization Errors
class AuthorizationError(GatewayError):
    """Base class for authorization errors."""
    pass


class AccessDeniedError(AuthorizationError):
    """Raised when a resolved location fails the ownership check."""

    def __init__(
        self,
        message: str = "You are not allowed to access this file",
        location: Optional[str] = None,
        principal_id: Optional[str] = None,
    ):
        details: Dict[str, Any] = {}
        if location:
            details["location"] = location
        if principal_id:
            details["principal_id"] = principal_id
        super().__init__(message, error_code="ACCESS_DENIED", details=details)
        self.location = location
        self.principal_id = principal_id


class PathResolutionError(AuthorizationError):
    """Raised when a caller-supplied path escapes its anchor directory."""

    def __init__(
        self,
        message: str = "The requested path is not accessible",
        raw_path: Optional[str] = None,
        anchor: Optional[str] = None,
    ):
        super().__init__(
            message,
            error_code="PATH_RESOLUTION_FAILED",
            details={"raw_path": raw_path, "anchor": anchor},
        )
        self.raw_path = raw_path
        self.anchor = anchor


# Resource Errors
class ResourceNotFoundError(GatewayError):
    """Raised when a resolved path or named resource is absent."""
    pass


class ConflictError(GatewayError):
    """Raised when an operation conflicts with existing state."""
    pass


class UploadConflictError(ConflictError):
    """Raised when none of the submitted files could be stored."""

    def __init__(self, message: str = "No files were uploaded", skipped: Optional[list] = None):
        super().__init__(
            message,
            error_code="UPLOAD_CONFLICT",
            details={"skipped": skipped or []},
        )
        self.skipped = skipped or []


# Storage Errors
class StorageOperationError(GatewayError):
    """Raised when a filesystem operation fails unexpectedly."""
    pass
