"""Storage root value object.

ONLY storage root - the single absolute directory that bounds every
tenant partition. Built once at process start and injected everywhere.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class StorageRoot:
    """Absolute, normalized storage root directory.

    Construction fails when the directory does not exist, so no operation
    can ever run against a missing root.
    """

    path: Path

    def __post_init__(self):
        raw = self.path
        if raw is None or not str(raw).strip():
            raise ConfigurationError("Upload directory is not configured")

        normalized = Path(os.path.normpath(os.path.abspath(os.fspath(raw))))
        if not normalized.is_dir():
            raise ConfigurationError(
                "Upload directory doesn't exist",
                details={"storage_root": str(normalized)},
            )

        object.__setattr__(self, "path", normalized)

    @classmethod
    def from_string(cls, value: Union[str, os.PathLike]) -> "StorageRoot":
        """Create storage root from a configured path.

        The raw value is checked before conversion, since `Path("")` is the
        current directory.
        """
        if value is None or not os.fspath(value).strip():
            raise ConfigurationError("Upload directory is not configured")
        return cls(Path(value))

    def partition(self, principal_id: str) -> Path:
        """Get the tenant partition directory for a principal id."""
        return self.path / principal_id

    def contains(self, location: Union[str, Path]) -> bool:
        """Check if a normalized location is the root or lies below it."""
        candidate = Path(os.path.normpath(os.fspath(location)))
        return candidate == self.path or self.path in candidate.parents

    def __str__(self) -> str:
        return str(self.path)
