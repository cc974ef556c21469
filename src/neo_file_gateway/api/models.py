"""
API response models.

Every endpoint answers with the `{status, message, data}` envelope; `data`
is omitted when there is nothing to return.
"""
from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..platform.files.application.commands import DeleteFilesResult
from ..platform.files.core.entities import FileRecord

T = TypeVar('T')


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        populate_by_name=True,
    )


class FileRecordSchema(BaseSchema):
    """File metadata as returned to clients."""
    name: str
    created_at: datetime
    modified_at: datetime = Field(serialization_alias="last_edited_at")
    size: int
    location: str
    type: str

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileRecordSchema":
        return cls.model_validate(record)


class BatchDeleteSchema(BaseSchema):
    """Outcome of a batch delete."""
    success: List[FileRecordSchema] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: DeleteFilesResult) -> "BatchDeleteSchema":
        return cls(
            success=[FileRecordSchema.from_record(record) for record in result.success],
            failed=list(result.failed),
        )


class ApiResponse(BaseSchema, Generic[T]):
    """Standard API response envelope."""
    status: int = Field(description="HTTP status code")
    message: str = Field(description="Response message")
    data: Optional[T] = Field(None, description="Response data")

    @classmethod
    def build(cls, status: int, message: str, data: Optional[Any] = None) -> "ApiResponse":
        return cls(status=status, message=message, data=data)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status, content=self.to_payload())


def records_to_schema(records: List[FileRecord]) -> List[FileRecordSchema]:
    return [FileRecordSchema.from_record(record) for record in records]
