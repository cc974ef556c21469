"""File platform.

Path resolution, ownership checks, the file catalog and file mutations,
all scoped to tenant partitions under one storage root.
"""

from .core.entities import FileRecord
from .application.services import AccessEvaluator, PathResolver, resolve_location
from .application.queries import GetFileInfoQuery, ListFilesQuery, SearchFilesQuery, SearchStatus
from .application.commands import (
    DeleteFileCommand,
    DeleteFilesCommand,
    IncomingFile,
    UploadFilesCommand,
)

__all__ = [
    "FileRecord",
    "AccessEvaluator",
    "PathResolver",
    "resolve_location",
    "GetFileInfoQuery",
    "ListFilesQuery",
    "SearchFilesQuery",
    "SearchStatus",
    "DeleteFileCommand",
    "DeleteFilesCommand",
    "IncomingFile",
    "UploadFilesCommand",
]
