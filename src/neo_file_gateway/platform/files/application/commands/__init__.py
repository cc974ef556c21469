"""File mutation commands."""

from .delete_file import DeleteFileCommand
from .delete_files import DeleteFilesCommand, DeleteFilesResult
from .upload_files import IncomingFile, UploadFilesCommand, UploadFilesResult

__all__ = [
    "DeleteFileCommand",
    "DeleteFilesCommand",
    "DeleteFilesResult",
    "IncomingFile",
    "UploadFilesCommand",
    "UploadFilesResult",
]
