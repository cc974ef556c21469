"""File platform infrastructure."""

from .archive import ARCHIVE_NAME, build_archive, iter_archive

__all__ = ["ARCHIVE_NAME", "build_archive", "iter_archive"]
