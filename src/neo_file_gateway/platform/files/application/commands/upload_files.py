"""File upload command."""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional

from .....core.exceptions import PathResolutionError, StorageOperationError, UploadConflictError
from ....auth.core.entities.principal import Principal
from ...core.entities.file_record import FileRecord
from ..services.path_resolver import PathResolver, resolve_location

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 1024 * 1024


@dataclass
class IncomingFile:
    """A file submitted for upload."""

    filename: Optional[str]
    stream: BinaryIO


@dataclass
class UploadFilesResult:
    """Response from an upload."""

    stored: List[FileRecord] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def safe_basename(filename: Optional[str]) -> Optional[str]:
    """Reduce a client filename to its last path component."""
    if not filename:
        return None
    name = filename.replace("\\", "/").rsplit("/", 1)[-1].strip()
    if not name or name in {".", ".."} or "\0" in name:
        return None
    return name


class UploadFilesCommand:
    """Stores uploaded files in the caller's partition.

    The partition is created on demand. Existing files are never
    overwritten; such uploads are skipped.
    """

    def __init__(self, path_resolver: PathResolver):
        self._path_resolver = path_resolver

    def execute(self, principal: Principal, files: Iterable[IncomingFile]) -> UploadFilesResult:
        """Upload files for a principal.

        Raises:
            UploadConflictError: If no file could be stored
            StorageOperationError: If writing fails
        """
        partition = self._path_resolver.tenant_partition(principal)
        try:
            partition.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create partition {partition}: {e}", exc_info=True)
            raise StorageOperationError(
                f"Failed to prepare upload directory: {e.strerror or e}",
                details={"partition": str(partition)},
            ) from e

        result = UploadFilesResult()
        for incoming in files:
            label = incoming.filename or ""
            name = safe_basename(incoming.filename)
            if name is None:
                logger.warning(f"Upload with unusable filename skipped: {label!r}")
                result.skipped.append(label)
                continue

            try:
                target = resolve_location(self._path_resolver.storage_root, partition, name)
            except PathResolutionError:
                result.skipped.append(label)
                continue

            if not self._write_exclusive(target, incoming.stream):
                logger.info(f"Upload skipped, {target} already exists")
                result.skipped.append(label)
                continue

            result.stored.append(FileRecord.from_path(target))

        if not result.stored:
            raise UploadConflictError(skipped=result.skipped)

        logger.info(f"Stored {len(result.stored)} files for {principal.id}")
        return result

    def _write_exclusive(self, target: Path, stream: BinaryIO) -> bool:
        try:
            handle = open(target, "xb")
        except FileExistsError:
            return False
        except OSError as e:
            logger.error(f"Failed to create {target}: {e}", exc_info=True)
            raise StorageOperationError(
                f"Failed to store file: {e.strerror or e}",
                details={"target": str(target)},
            ) from e

        try:
            with handle:
                shutil.copyfileobj(stream, handle, COPY_CHUNK_SIZE)
        except OSError as e:
            logger.error(f"Failed to write {target}: {e}", exc_info=True)
            target.unlink(missing_ok=True)
            raise StorageOperationError(
                f"Failed to store file: {e.strerror or e}",
                details={"target": str(target)},
            ) from e

        return True
