"""
Application exception handlers.

Translates gateway exceptions into the response envelope. Route code
raises; it never builds error responses itself.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import (
    AuthenticationError,
    GatewayError,
    IdentityServiceUnavailable,
    create_error_response,
    get_http_status_code,
)
from .models import ApiResponse

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("query", "body"))
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


class ExceptionHandlerRegistry:
    """Registry for the gateway's exception handlers."""

    def __init__(self, is_production: bool = True):
        self.is_production = is_production

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(GatewayError)
        async def gateway_exception_handler(request: Request, exc: GatewayError):
            """Handle gateway exceptions."""
            status_code = get_http_status_code(exc)

            if isinstance(exc, IdentityServiceUnavailable):
                logger.error(f"{request.method} {request.url.path}: {exc.message} ({exc.details})")
            elif isinstance(exc, AuthenticationError):
                logger.warning(f"{request.method} {request.url.path}: {exc.message}")
            elif status_code >= 500:
                logger.error(f"{request.method} {request.url.path}: {exc.error_code} {exc.message} {exc.details}")
            else:
                logger.info(f"{request.method} {request.url.path}: {exc.error_code} {exc.message}")

            return JSONResponse(status_code=status_code, content=create_error_response(exc))

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            """Handle framework HTTP errors such as unknown routes."""
            response = ApiResponse.build(exc.status_code, str(exc.detail)).to_response()
            if exc.headers:
                response.headers.update(exc.headers)
            return response

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(request: Request, exc: RequestValidationError):
            """Handle request validation errors."""
            return ApiResponse.build(status.HTTP_400_BAD_REQUEST, _validation_message(exc)).to_response()

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            if self.is_production:
                message = "An unexpected error occurred"
            else:
                message = str(exc) or type(exc).__name__

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ApiResponse.build(status.HTTP_500_INTERNAL_SERVER_ERROR, message).to_payload(),
            )


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """
    Register exception handlers for a FastAPI application.

    Args:
        app: FastAPI application instance
        is_production: Whether running in production mode
    """
    registry = ExceptionHandlerRegistry(is_production)
    registry.register_handlers(app)
