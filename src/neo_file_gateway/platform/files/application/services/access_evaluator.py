"""Ownership-based access evaluation."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .....core.value_objects import StorageRoot
from ....auth.core.entities.principal import Principal

logger = logging.getLogger(__name__)


class AccessEvaluator:
    """Decides whether a principal may read or delete a resolved location.

    A location is accessible when it lies under the principal's own
    partition. The admin override is honoured only for Admin principals and
    is never set by download or delete.
    """

    def __init__(self, storage_root: StorageRoot):
        self.storage_root = storage_root

    def owner_of(self, location: Union[str, Path]) -> Optional[str]:
        """Get the partition name a location belongs to, if any."""
        candidate = Path(os.path.normpath(os.fspath(location)))
        if not self.storage_root.contains(candidate) or candidate == self.storage_root.path:
            return None
        return candidate.relative_to(self.storage_root.path).parts[0]

    def crosses_link(self, location: Union[str, Path]) -> bool:
        """Check if the location, or any directory below the root on the way to it, is a symbolic link."""
        candidate = Path(os.path.normpath(os.fspath(location)))
        if not self.storage_root.contains(candidate):
            return os.path.islink(candidate)

        current = self.storage_root.path
        for part in candidate.relative_to(current).parts:
            current = current / part
            if os.path.islink(current):
                return True
        return False

    def can_access(
        self,
        principal: Principal,
        location: Union[str, Path],
        admin_override: bool = False,
    ) -> bool:
        """Check access to a location.

        Symbolic links are never accessible, and neither is anything reached
        through a linked directory. This holds for the admin override too.
        """
        if self.crosses_link(location):
            logger.warning(f"Access through symbolic link refused: {location}")
            return False

        if admin_override and principal.is_admin:
            return True

        return self.owner_of(location) == principal.id.value
