"""Single file deletion command."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .....core.exceptions import AccessDeniedError, ResourceNotFoundError, StorageOperationError
from ....auth.core.entities.principal import Principal
from ...core.entities.file_record import FileRecord
from ..queries.get_file_info import GetFileInfoQuery
from ..services.access_evaluator import AccessEvaluator

logger = logging.getLogger(__name__)


def unlink_file(location: Union[str, Path]) -> None:
    """Unlink a file, mapping failures to gateway errors."""
    try:
        os.unlink(location)
    except FileNotFoundError as e:
        raise ResourceNotFoundError(
            f"{os.path.basename(os.fspath(location))} wasn't found",
            details={"location": os.fspath(location)},
        ) from e
    except OSError as e:
        logger.error(f"Failed to delete {location}: {e}", exc_info=True)
        raise StorageOperationError(
            f"Failed to delete file: {e.strerror or e}",
            details={"location": os.fspath(location)},
        ) from e


class DeleteFileCommand:
    """Deletes one file after the existence and ownership checks."""

    def __init__(self, access_evaluator: AccessEvaluator, file_info: Optional[GetFileInfoQuery] = None):
        self._access_evaluator = access_evaluator
        self._file_info = file_info or GetFileInfoQuery()

    def execute(self, principal: Principal, location: Union[str, Path], identifier: str) -> FileRecord:
        """Delete a file and return its last snapshot.

        Raises:
            ResourceNotFoundError: If the file does not exist
            AccessDeniedError: If the principal does not own the file
        """
        record = self._file_info.execute(location)
        if record is None:
            raise ResourceNotFoundError(f"{identifier} wasn't found", details={"file": identifier})

        if not self._access_evaluator.can_access(principal, location):
            raise AccessDeniedError(location=os.fspath(location), principal_id=principal.id.value)

        unlink_file(location)
        logger.info(f"Deleted {location} for {principal.id}")
        return record
