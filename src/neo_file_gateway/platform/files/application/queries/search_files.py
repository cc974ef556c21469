"""Search files query."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ...core.entities.file_record import FileRecord
from .list_files import ListFilesQuery


class SearchStatus(str, Enum):
    """Outcome of a search."""
    EMPTY_CATALOG = "empty_catalog"
    NO_NAME_MATCH = "no_name_match"
    NO_TYPE_MATCH = "no_type_match"
    FOUND = "found"


@dataclass
class SearchFilesResult:
    status: SearchStatus
    query: str
    file_type: Optional[str] = None
    records: List[FileRecord] = field(default_factory=list)


def normalize_file_type(file_type: Optional[str]) -> Optional[str]:
    """Normalize a type filter to a lowercase extension with a leading dot."""
    if file_type is None:
        return None
    value = file_type.strip().lower()
    if not value or value == ".":
        return None
    return value if value.startswith(".") else f".{value}"


class SearchFilesQuery:
    """Searches the recursive catalog below a directory.

    Names are matched by case-insensitive substring, then optionally
    filtered by exact extension.
    """

    def __init__(self, list_files: Optional[ListFilesQuery] = None):
        self._list_files = list_files or ListFilesQuery()

    def execute(
        self,
        base_path: Union[str, Path],
        query: str,
        file_type: Optional[str] = None,
    ) -> SearchFilesResult:
        file_type = normalize_file_type(file_type)

        catalog = self._list_files.execute(base_path, recursive=True)
        if not catalog:
            return SearchFilesResult(SearchStatus.EMPTY_CATALOG, query, file_type)

        needle = query.lower()
        matches = [record for record in catalog if needle in record.name.lower()]
        if not matches:
            return SearchFilesResult(SearchStatus.NO_NAME_MATCH, query, file_type)

        if file_type:
            matches = [record for record in matches if record.type == file_type]
            if not matches:
                return SearchFilesResult(SearchStatus.NO_TYPE_MATCH, query, file_type)

        return SearchFilesResult(SearchStatus.FOUND, query, file_type, matches)
