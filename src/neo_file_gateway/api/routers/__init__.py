"""API routers."""

from .files import router as files_router
from .static import router as static_router
from .system import router as system_router

__all__ = ["files_router", "static_router", "system_router"]
