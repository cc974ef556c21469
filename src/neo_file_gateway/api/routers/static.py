"""Owner-only raw file serving."""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from ...core.exceptions import AccessDeniedError, PathResolutionError, ResourceNotFoundError
from ...core.value_objects import StorageRoot
from ...platform.auth import Principal
from ...platform.files import AccessEvaluator, GetFileInfoQuery, resolve_location
from ..dependencies import get_access_evaluator, get_current_principal, get_file_info_query, get_storage_root

router = APIRouter(prefix="/static", tags=["Static"])

STATIC_DENIED_MESSAGE = "You don't have access to this file"


@router.get("/{file_path:path}")
def serve_static(
    file_path: str,
    principal: Principal = Depends(get_current_principal),
    storage_root: StorageRoot = Depends(get_storage_root),
    access_evaluator: AccessEvaluator = Depends(get_access_evaluator),
    file_info: GetFileInfoQuery = Depends(get_file_info_query),
):
    """Serve a file whose first path segment is the caller's id."""
    try:
        location = resolve_location(storage_root, storage_root.path, file_path)
    except PathResolutionError as e:
        raise AccessDeniedError(STATIC_DENIED_MESSAGE, principal_id=principal.id.value) from e

    if access_evaluator.owner_of(location) != principal.id.value:
        raise AccessDeniedError(STATIC_DENIED_MESSAGE, location=str(location), principal_id=principal.id.value)

    if file_info.execute(location) is None:
        raise ResourceNotFoundError(f"{file_path} wasn't found")

    if not access_evaluator.can_access(principal, location):
        raise AccessDeniedError(STATIC_DENIED_MESSAGE, location=str(location), principal_id=principal.id.value)

    return FileResponse(location)
