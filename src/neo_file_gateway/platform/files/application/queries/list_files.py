"""List files query."""

import logging
import os
from pathlib import Path
from typing import List, Union

from .....core.exceptions import StorageOperationError
from ...core.entities.file_record import FileRecord

logger = logging.getLogger(__name__)


class ListFilesQuery:
    """Lists the files below a directory.

    Entries are returned in traversal order, unsorted. Symbolic links are
    skipped and never followed.
    """

    def execute(self, path: Union[str, Path], recursive: bool = False) -> List[FileRecord]:
        """List files in a directory.

        Args:
            path: Directory to list
            recursive: Whether to descend into subdirectories

        Returns:
            File records, empty when the directory does not exist

        Raises:
            StorageOperationError: If the directory cannot be read
        """
        records: List[FileRecord] = []
        self._collect(os.fspath(path), recursive, records)
        return records

    def _collect(self, directory: str, recursive: bool, records: List[FileRecord]) -> None:
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_symlink():
                        continue

                    if entry.is_file(follow_symlinks=False):
                        try:
                            records.append(FileRecord.from_stat(entry.path, entry.stat(follow_symlinks=False)))
                        except FileNotFoundError:
                            logger.debug(f"File vanished while listing: {entry.path}")
                    elif recursive and entry.is_dir(follow_symlinks=False):
                        self._collect(entry.path, recursive, records)
        except (FileNotFoundError, NotADirectoryError):
            return
        except OSError as e:
            logger.error(f"Failed to list directory {directory}: {e}", exc_info=True)
            raise StorageOperationError(
                f"Failed to list directory: {e.strerror or e}",
                details={"directory": directory},
            ) from e
