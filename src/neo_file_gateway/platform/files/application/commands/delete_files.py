"""Batch file deletion command."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .....core.exceptions import PathResolutionError, ResourceNotFoundError
from ....auth.core.entities.principal import Principal
from ...core.entities.file_record import FileRecord
from ..queries.get_file_info import GetFileInfoQuery
from ..services.access_evaluator import AccessEvaluator
from ..services.path_resolver import PathResolver
from .delete_file import unlink_file

logger = logging.getLogger(__name__)


@dataclass
class DeleteFilesResult:
    """Response from a batch delete."""

    success: List[FileRecord] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


class DeleteFilesCommand:
    """Deletes several files, reporting partial success.

    Items are resolved independently. A User item outside the caller's
    partition counts as not found; there is no per-item denial.
    """

    def __init__(
        self,
        path_resolver: PathResolver,
        access_evaluator: AccessEvaluator,
        file_info: Optional[GetFileInfoQuery] = None,
    ):
        self._path_resolver = path_resolver
        self._access_evaluator = access_evaluator
        self._file_info = file_info or GetFileInfoQuery()

    def execute(
        self,
        principal: Principal,
        targets: Iterable[str],
        use_user_dir: bool = False,
    ) -> DeleteFilesResult:
        """Delete files for a principal.

        Raises:
            ResourceNotFoundError: If none of the files were found
        """
        result = DeleteFilesResult()

        for identifier in targets:
            try:
                location = self._path_resolver.resolve_target(principal, identifier, use_user_dir)
            except PathResolutionError:
                result.failed.append(identifier)
                continue

            record = self._file_info.execute(location)
            if record is None or not self._in_scope(principal, location):
                result.failed.append(identifier)
                continue

            try:
                unlink_file(location)
            except ResourceNotFoundError:
                logger.info(f"File vanished before delete: {location}")
                result.failed.append(identifier)
                continue

            result.success.append(record)

        if not result.success:
            raise ResourceNotFoundError(
                "None of the requested files were found",
                details={"failed": result.failed},
            )

        logger.info(f"Deleted {len(result.success)} files for {principal.id}, {len(result.failed)} failed")
        return result

    def _in_scope(self, principal: Principal, location) -> bool:
        if principal.is_admin:
            return self._access_evaluator.can_access(principal, location, admin_override=True)
        return self._access_evaluator.can_access(principal, location)
