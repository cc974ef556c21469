"""HTTP surface of the file gateway."""

from .app import create_app

__all__ = ["create_app"]
