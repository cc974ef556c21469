"""Path resolution for tenant-scoped file access.

ONLY path resolution - turns caller-supplied paths into normalized,
containment-checked locations. Nothing here touches the filesystem.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .....core.exceptions import PathResolutionError
from .....core.value_objects import StorageRoot
from ....auth.core.entities.principal import Principal

logger = logging.getLogger(__name__)

_LEADING_SEPARATORS = "/" + os.sep + (os.altsep or "")


def _is_within(anchor: Path, candidate: Path) -> bool:
    return candidate == anchor or anchor in candidate.parents


def resolve_location(root: StorageRoot, anchor: Union[str, Path], raw: str) -> Path:
    """Resolve a raw relative path against an anchor directory.

    Leading separators are stripped so an absolute value cannot re-anchor
    the path. The joined path is normalized lexically and must be the
    anchor itself or lie below it, and the anchor must lie under the root.

    Args:
        root: Storage root bounding every anchor
        anchor: Directory the raw path is relative to
        raw: Caller-supplied path

    Returns:
        Normalized absolute location

    Raises:
        PathResolutionError: If the path is malformed or escapes its anchor
    """
    anchor_path = Path(os.path.normpath(os.fspath(anchor)))
    if not root.contains(anchor_path):
        raise PathResolutionError(raw_path=raw, anchor=str(anchor_path))

    if raw is None:
        return anchor_path

    if "\0" in raw:
        raise PathResolutionError(raw_path=raw.replace("\0", "\\0"), anchor=str(anchor_path))

    relative = raw.lstrip(_LEADING_SEPARATORS)
    candidate = Path(os.path.normpath(os.path.join(anchor_path, relative)))

    if not _is_within(anchor_path, candidate):
        logger.warning(f"Path escape rejected: {raw!r} against {anchor_path}")
        raise PathResolutionError(raw_path=raw, anchor=str(anchor_path))

    return candidate


class PathResolver:
    """Derives tenant-scoped locations for principals.

    A User is anchored at its own partition. An Admin browsing with an
    explicit path is anchored at the storage root.
    """

    def __init__(self, storage_root: StorageRoot):
        self.storage_root = storage_root

    def tenant_partition(self, principal: Principal) -> Path:
        """Get the partition directory owned by a principal."""
        return self.storage_root.partition(principal.id.value)

    def resolve(self, principal: Principal, raw: Optional[str] = None) -> Path:
        """Resolve a browsing path for a principal.

        Raises:
            PathResolutionError: If the path escapes the principal's scope
        """
        partition = self.tenant_partition(principal)
        if not raw:
            return partition

        anchor = self.storage_root.path if principal.is_admin else partition
        return resolve_location(self.storage_root, anchor, raw)

    def resolve_target(self, principal: Principal, raw_file: str, use_user_dir: bool = False) -> Path:
        """Resolve a path that names a file directly.

        With `use_user_dir` the path is anchored at the caller's partition.
        Without it an absolute path is taken as is and a relative one is read
        against the storage root; either way it must stay under the root.
        Ownership is checked separately by the access evaluator.

        Raises:
            PathResolutionError: If the path escapes its anchor
        """
        if use_user_dir:
            return resolve_location(self.storage_root, self.tenant_partition(principal), raw_file)

        if "\0" in raw_file:
            raise PathResolutionError(raw_path=raw_file.replace("\0", "\\0"), anchor=str(self.storage_root))

        if os.path.isabs(raw_file):
            candidate = Path(os.path.normpath(raw_file))
            if not self.storage_root.contains(candidate):
                logger.warning(f"Absolute path outside storage root rejected: {raw_file!r}")
                raise PathResolutionError(raw_path=raw_file, anchor=str(self.storage_root))
            return candidate

        return resolve_location(self.storage_root, self.storage_root.path, raw_file)
