"""Request logging middleware.

Logs method, path, query, status, client ip and duration for every
request. Credentials in headers and in the `bearer` query parameter are
masked before they reach the log.
"""

import logging
import time
from typing import Dict, List, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

MASK = "***"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for request/response logging."""

    def __init__(
        self,
        app,
        sensitive_headers: Optional[List[str]] = None,
        sensitive_params: Optional[List[str]] = None,
        exempt_paths: Optional[List[str]] = None,
    ):
        super().__init__(app)
        self.sensitive_headers = [h.lower() for h in (sensitive_headers or ["authorization", "cookie"])]
        self.sensitive_params = [p.lower() for p in (sensitive_params or ["bearer"])]
        self.exempt_paths = exempt_paths or ["/status", "/favicon.ico"]

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request with logging."""
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        method = request.method
        path = request.url.path
        query = self._sanitize_query(request)
        client_ip = self._get_client_ip(request)
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{method} {path} {query} from {client_ip} failed after {duration_ms:.2f}ms - "
                f"{type(e).__name__}: {e}",
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            f"{method} {path} {query} from {client_ip} - {response.status_code} in {duration_ms:.2f}ms",
        )
        logger.debug(f"Request headers: {self._sanitize_headers(dict(request.headers))}")
        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"

    def _sanitize_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Mask sensitive headers."""
        return {
            key: MASK if key.lower() in self.sensitive_headers else value
            for key, value in headers.items()
        }

    def _sanitize_query(self, request: Request) -> Dict[str, str]:
        """Mask sensitive query parameters."""
        return {
            key: MASK if key.lower() in self.sensitive_params else value
            for key, value in request.query_params.multi_items()
        }
