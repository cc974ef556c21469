"""Zip archive streaming for multi-file downloads."""

import logging
import os
import tempfile
import zipfile
from pathlib import Path
from typing import BinaryIO, Iterator, Sequence

from ....core.exceptions import StorageOperationError

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "files.zip"
STREAM_CHUNK_SIZE = 64 * 1024
DEFAULT_SPOOL_BYTES = 8 * 1024 * 1024


def _unique_arcname(name: str, used: set) -> str:
    if name not in used:
        return name
    stem, suffix = os.path.splitext(name)
    counter = 1
    while f"{stem} ({counter}){suffix}" in used:
        counter += 1
    return f"{stem} ({counter}){suffix}"


def build_archive(locations: Sequence[Path], spool_bytes: int = DEFAULT_SPOOL_BYTES) -> BinaryIO:
    """Build a zip archive of files in a spooled temporary file.

    The archive stays in memory up to `spool_bytes` and spills to disk
    beyond that. Entries are named by basename; clashing names get a
    numeric suffix.

    Returns:
        The archive, rewound to the start

    Raises:
        StorageOperationError: If a file cannot be read
    """
    spool = tempfile.SpooledTemporaryFile(max_size=spool_bytes)
    used: set = set()
    try:
        with zipfile.ZipFile(spool, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
            for location in locations:
                arcname = _unique_arcname(os.path.basename(os.fspath(location)), used)
                used.add(arcname)
                archive.write(location, arcname=arcname)
    except OSError as e:
        spool.close()
        logger.error(f"Failed to build archive: {e}", exc_info=True)
        raise StorageOperationError(f"Failed to build archive: {e.strerror or e}") from e

    spool.seek(0)
    return spool


def iter_archive(archive: BinaryIO, chunk_size: int = STREAM_CHUNK_SIZE) -> Iterator[bytes]:
    """Stream an archive in chunks and close it once exhausted."""
    try:
        while True:
            chunk = archive.read(chunk_size)
            if not chunk:
                break
            yield chunk
    finally:
        archive.close()
