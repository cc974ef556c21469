"""Base exceptions for neo-file-gateway.

This module defines the root of the gateway exception hierarchy.
All exceptions inherit from GatewayError and carry an error code, details
and a stable, caller-facing message used in API responses.
"""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base exception for all gateway errors.

    The message is returned verbatim to API callers, so subclasses must
    never put delegate internals or stack traces into it.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: GatewayError) -> Dict[str, Any]:
    """Create the response envelope for an exception.

    Args:
        exception: The gateway exception

    Returns:
        Envelope dictionary with status and message
    """
    return {
        "status": get_http_status_code(exception),
        "message": exception.message,
    }
