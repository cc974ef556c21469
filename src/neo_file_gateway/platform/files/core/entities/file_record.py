"""File record entity."""

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union


@dataclass(frozen=True)
class FileRecord:
    """Metadata snapshot of a stored file.

    Built from live stat data on every request and never cached.
    """

    name: str
    created_at: datetime
    modified_at: datetime
    size: int
    location: str
    type: str

    @classmethod
    def from_stat(cls, location: Union[str, Path], stat_result: os.stat_result) -> "FileRecord":
        """Create a record from a path and its stat result.

        Birth time is used where the platform reports it, otherwise ctime.
        """
        location = os.fspath(location)
        created = getattr(stat_result, "st_birthtime", None)
        if created is None:
            created = stat_result.st_ctime

        return cls(
            name=os.path.basename(location),
            created_at=datetime.fromtimestamp(created, tz=timezone.utc),
            modified_at=datetime.fromtimestamp(stat_result.st_mtime, tz=timezone.utc),
            size=stat_result.st_size,
            location=location,
            type=os.path.splitext(location)[1].lower(),
        )

    @classmethod
    def from_path(cls, location: Union[str, Path]) -> "FileRecord":
        """Create a record by stat-ing a path without following symlinks."""
        return cls.from_stat(location, os.stat(location, follow_symlinks=False))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "created_at": self.created_at.isoformat(),
            "last_edited_at": self.modified_at.isoformat(),
            "size": self.size,
            "location": self.location,
            "type": self.type,
        }
