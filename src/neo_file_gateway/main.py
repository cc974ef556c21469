"""Entry point for running the file gateway with uvicorn.

`app` is built on first access so importing this module never needs a
configured storage root.
"""

from functools import lru_cache

import uvicorn
from fastapi import FastAPI

from .api.app import create_app
from .config.logging_config import setup_logging
from .config.settings import get_settings


@lru_cache()
def build_app() -> FastAPI:
    """Build the process-wide application."""
    setup_logging()
    return create_app()


def main() -> None:
    """Run the gateway server."""
    setup_logging()
    settings = get_settings()
    uvicorn.run(
        "neo_file_gateway.main:build_app",
        factory=True,
        host=settings.host,
        port=settings.effective_port,
        reload=settings.debug and not settings.is_production,
        log_config=None,
    )


def __getattr__(name: str):
    if name == "app":
        return build_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


if __name__ == "__main__":
    main()
