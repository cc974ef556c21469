"""File endpoints: list, search, upload, download and delete."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import FileResponse, StreamingResponse

from ...config.settings import GatewaySettings
from ...core.exceptions import AccessDeniedError, InvalidRequestError, ResourceNotFoundError
from ...platform.auth import Principal
from ...platform.files import (
    AccessEvaluator,
    DeleteFileCommand,
    DeleteFilesCommand,
    GetFileInfoQuery,
    IncomingFile,
    ListFilesQuery,
    PathResolver,
    SearchFilesQuery,
    SearchStatus,
    UploadFilesCommand,
)
from ...platform.files.infrastructure import ARCHIVE_NAME, build_archive, iter_archive
from ..dependencies import (
    get_access_evaluator,
    get_current_principal,
    get_delete_file_command,
    get_delete_files_command,
    get_file_info_query,
    get_list_files_query,
    get_path_resolver,
    get_search_files_query,
    get_settings,
    get_upload_files_command,
)
from ..models import ApiResponse, BatchDeleteSchema, FileRecordSchema, records_to_schema

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])


@router.get("/list")
def list_files(
    path: Optional[str] = Query(None, description="Directory relative to the caller's scope"),
    recursive: bool = Query(True, description="Descend into subdirectories"),
    principal: Principal = Depends(get_current_principal),
    path_resolver: PathResolver = Depends(get_path_resolver),
    access_evaluator: AccessEvaluator = Depends(get_access_evaluator),
    list_files_query: ListFilesQuery = Depends(get_list_files_query),
):
    """List the files in the caller's partition, or below `path`."""
    location = path_resolver.resolve(principal, path)
    if access_evaluator.crosses_link(location) or not location.is_dir():
        raise ResourceNotFoundError("The requested directory wasn't found", details={"path": path})

    records = list_files_query.execute(location, recursive=recursive)
    return ApiResponse.build(200, f"{len(records)} files found", records_to_schema(records)).to_response()


@router.get("/search")
def search_files(
    q: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    file_type: Optional[str] = Query(None, alias="type", description="File extension filter"),
    path: Optional[str] = Query(None, description="Directory to search below"),
    principal: Principal = Depends(get_current_principal),
    path_resolver: PathResolver = Depends(get_path_resolver),
    access_evaluator: AccessEvaluator = Depends(get_access_evaluator),
    search_files_query: SearchFilesQuery = Depends(get_search_files_query),
):
    """Search files by name and optionally by extension."""
    if not q or not q.strip():
        raise InvalidRequestError("No search query provided")

    location = path_resolver.resolve(principal, path)
    if access_evaluator.crosses_link(location):
        raise ResourceNotFoundError("The requested directory wasn't found", details={"path": path})

    result = search_files_query.execute(location, q.strip(), file_type)

    if result.status == SearchStatus.EMPTY_CATALOG:
        raise ResourceNotFoundError("There are no files available")
    if result.status == SearchStatus.NO_NAME_MATCH:
        raise ResourceNotFoundError(f"No matches for '{result.query}'")
    if result.status == SearchStatus.NO_TYPE_MATCH:
        raise ResourceNotFoundError(f"No matches for '{result.query}' and type '{result.file_type}'")

    records = result.records
    return ApiResponse.build(200, f"{len(records)} files found", records_to_schema(records)).to_response()


@router.post("/upload")
def upload_files(
    files: Optional[List[UploadFile]] = File(None, description="Files to store"),
    principal: Principal = Depends(get_current_principal),
    settings: GatewaySettings = Depends(get_settings),
    upload_command: UploadFilesCommand = Depends(get_upload_files_command),
):
    """Store files in the caller's partition without overwriting."""
    files = files or []
    if len(files) > settings.max_upload_files:
        raise InvalidRequestError(f"Too many files provided (max {settings.max_upload_files})")

    result = upload_command.execute(
        principal,
        [IncomingFile(filename=upload.filename, stream=upload.file) for upload in files],
    )
    stored = result.stored
    return ApiResponse.build(200, f"{len(stored)} files were uploaded", records_to_schema(stored)).to_response()


@router.get("/download")
def download_files(
    file: Optional[List[str]] = Query(None, description="File path, repeat for an archive"),
    use_user_dir: bool = Query(False, alias="useUserDir"),
    principal: Principal = Depends(get_current_principal),
    settings: GatewaySettings = Depends(get_settings),
    path_resolver: PathResolver = Depends(get_path_resolver),
    access_evaluator: AccessEvaluator = Depends(get_access_evaluator),
    file_info: GetFileInfoQuery = Depends(get_file_info_query),
):
    """Download one file, or several as a zip archive."""
    identifiers = [value for value in (file or []) if value]
    if not identifiers:
        raise InvalidRequestError("No file provided")

    targets = []
    for identifier in identifiers:
        location = path_resolver.resolve_target(principal, identifier, use_user_dir)
        record = file_info.execute(location)
        if record is None:
            raise ResourceNotFoundError(f"{identifier} wasn't found", details={"file": identifier})
        if not access_evaluator.can_access(principal, location):
            raise AccessDeniedError(location=str(location), principal_id=principal.id.value)
        targets.append((location, record))

    if len(targets) == 1:
        location, record = targets[0]
        logger.info(f"Serving {location} to {principal.id}")
        return FileResponse(location, filename=record.name)

    archive = build_archive([location for location, _ in targets], settings.archive_spool_bytes)
    logger.info(f"Serving archive of {len(targets)} files to {principal.id}")
    return StreamingResponse(
        iter_archive(archive),
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{ARCHIVE_NAME}"'},
    )


@router.delete("/delete")
def delete_files(
    file: Optional[List[str]] = Query(None, description="File path, repeat for a batch"),
    use_user_dir: bool = Query(False, alias="useUserDir"),
    principal: Principal = Depends(get_current_principal),
    path_resolver: PathResolver = Depends(get_path_resolver),
    delete_file_command: DeleteFileCommand = Depends(get_delete_file_command),
    delete_files_command: DeleteFilesCommand = Depends(get_delete_files_command),
):
    """Permanently delete one file, or several with partial success."""
    identifiers = [value for value in (file or []) if value]
    if not identifiers:
        raise InvalidRequestError("No file provided")

    if len(identifiers) == 1:
        identifier = identifiers[0]
        location = path_resolver.resolve_target(principal, identifier, use_user_dir)
        record = delete_file_command.execute(principal, location, identifier)
        return ApiResponse.build(
            200, "The file was permanently deleted", FileRecordSchema.from_record(record)
        ).to_response()

    result = delete_files_command.execute(principal, identifiers, use_user_dir)
    return ApiResponse.build(
        200,
        f"{len(result.success)} files were permanently deleted",
        BatchDeleteSchema.from_result(result),
    ).to_response()
