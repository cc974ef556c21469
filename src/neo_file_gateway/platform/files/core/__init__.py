"""File platform core."""

from .entities import FileRecord

__all__ = ["FileRecord"]
