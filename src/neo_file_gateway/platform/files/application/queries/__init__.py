"""File catalog queries."""

from .get_file_info import GetFileInfoQuery
from .list_files import ListFilesQuery
from .search_files import SearchFilesQuery, SearchFilesResult, SearchStatus, normalize_file_type

__all__ = [
    "GetFileInfoQuery",
    "ListFilesQuery",
    "SearchFilesQuery",
    "SearchFilesResult",
    "SearchStatus",
    "normalize_file_type",
]
