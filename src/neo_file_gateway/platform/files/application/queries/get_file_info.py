"""Get file info query."""

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Union

from .....core.exceptions import StorageOperationError
from ...core.entities.file_record import FileRecord

logger = logging.getLogger(__name__)


class GetFileInfoQuery:
    """Stats a single location.

    Directories count as absent. Symbolic links are reported as they are,
    without following them, so the access evaluator can refuse them.
    """

    def execute(self, path: Union[str, Path]) -> Optional[FileRecord]:
        try:
            stat_result = os.stat(path, follow_symlinks=False)
        except (FileNotFoundError, NotADirectoryError):
            return None
        except OSError as e:
            logger.error(f"Failed to stat {path}: {e}", exc_info=True)
            raise StorageOperationError(
                f"Failed to read file information: {e.strerror or e}",
                details={"path": os.fspath(path)},
            ) from e

        if stat.S_ISDIR(stat_result.st_mode):
            return None

        return FileRecord.from_stat(path, stat_result)
