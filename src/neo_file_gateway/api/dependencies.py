"""
FastAPI dependencies.

Shared state lives on `app.state` and is built once by the application
factory; the dependencies below only hand it out per request.
"""
import logging
from typing import Optional

from fastapi import Depends, Header, Query, Request

from ..config.settings import GatewaySettings
from ..core.exceptions import ConfigurationError
from ..core.value_objects import StorageRoot
from ..platform.auth import Authenticator, IdentityProvider, Principal
from ..platform.files import (
    AccessEvaluator,
    DeleteFileCommand,
    DeleteFilesCommand,
    GetFileInfoQuery,
    ListFilesQuery,
    PathResolver,
    SearchFilesQuery,
    UploadFilesCommand,
)

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> GatewaySettings:
    """Get the settings the application was built with."""
    return request.app.state.settings


def get_storage_root(request: Request) -> StorageRoot:
    """Get the storage root fixed at startup."""
    return request.app.state.storage_root


def get_identity_provider(request: Request) -> IdentityProvider:
    """Get the identity provider."""
    provider = getattr(request.app.state, "identity_provider", None)
    if provider is None:
        raise ConfigurationError("Identity provider is not configured")
    return provider


def get_authenticator(identity_provider: IdentityProvider = Depends(get_identity_provider)) -> Authenticator:
    return Authenticator(identity_provider)


async def get_current_principal(
    authorization: Optional[str] = Header(None),
    bearer: Optional[str] = Query(None, description="Credential as `<id>.<secret>`"),
    authenticator: Authenticator = Depends(get_authenticator),
) -> Principal:
    """Authenticate the request from the Authorization header or `bearer` query."""
    return await authenticator.authenticate_request(authorization=authorization, bearer=bearer)


def get_path_resolver(storage_root: StorageRoot = Depends(get_storage_root)) -> PathResolver:
    return PathResolver(storage_root)


def get_access_evaluator(storage_root: StorageRoot = Depends(get_storage_root)) -> AccessEvaluator:
    return AccessEvaluator(storage_root)


def get_list_files_query() -> ListFilesQuery:
    return ListFilesQuery()


def get_search_files_query(list_files: ListFilesQuery = Depends(get_list_files_query)) -> SearchFilesQuery:
    return SearchFilesQuery(list_files)


def get_file_info_query() -> GetFileInfoQuery:
    return GetFileInfoQuery()


def get_upload_files_command(path_resolver: PathResolver = Depends(get_path_resolver)) -> UploadFilesCommand:
    return UploadFilesCommand(path_resolver)


def get_delete_file_command(
    access_evaluator: AccessEvaluator = Depends(get_access_evaluator),
    file_info: GetFileInfoQuery = Depends(get_file_info_query),
) -> DeleteFileCommand:
    return DeleteFileCommand(access_evaluator, file_info)


def get_delete_files_command(
    path_resolver: PathResolver = Depends(get_path_resolver),
    access_evaluator: AccessEvaluator = Depends(get_access_evaluator),
    file_info: GetFileInfoQuery = Depends(get_file_info_query),
) -> DeleteFilesCommand:
    return DeleteFilesCommand(path_resolver, access_evaluator, file_info)
