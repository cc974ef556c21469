"""Pytest configuration and fixtures for neo-file-gateway tests."""

from pathlib import Path
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from neo_file_gateway.api.app import create_app
from neo_file_gateway.config.settings import GatewaySettings
from neo_file_gateway.core.exceptions import InvalidCredentialsError
from neo_file_gateway.core.value_objects import Role, StorageRoot
from neo_file_gateway.platform.auth import Principal
from neo_file_gateway.platform.files import AccessEvaluator, PathResolver

USER_ID = "demo-user-uuid"
ADMIN_ID = "demo-admin-uuid"
OTHER_ID = "other-user-uuid"

USER_FILE_CONTENT = b"This is a user test file"
NESTED_FILE_CONTENT = b"This is a nested file in a user dir."
ADMIN_FILE_CONTENT = b"This is an admin testfile"

USER_HEADER = {"Authorization": f"Bearer {USER_ID}:user-secret"}
ADMIN_HEADER = {"Authorization": f"Bearer {ADMIN_ID}:admin-secret"}
OTHER_HEADER = {"Authorization": f"Bearer {OTHER_ID}:other-secret"}


class StubIdentityProvider:
    """Identity provider answering from a fixed credential table."""

    def __init__(self, principals: Dict[str, Principal]):
        self.principals = principals
        self.calls = []

    async def authenticate(self, credential: str) -> Principal:
        self.calls.append(credential)
        token = credential[len("Bearer "):] if credential.startswith("Bearer ") else credential
        principal = self.principals.get(token)
        if principal is None:
            raise InvalidCredentialsError(reason="unknown token")
        return principal


@pytest.fixture
def user_principal() -> Principal:
    return Principal.create(USER_ID, Role.USER)


@pytest.fixture
def admin_principal() -> Principal:
    return Principal.create(ADMIN_ID, Role.ADMIN)


@pytest.fixture
def other_principal() -> Principal:
    return Principal.create(OTHER_ID, Role.USER)


@pytest.fixture
def storage_dir(tmp_path) -> Path:
    """Storage directory seeded with a user and an admin partition."""
    root = tmp_path / "storage"
    (root / USER_ID / "nested").mkdir(parents=True)
    (root / ADMIN_ID).mkdir(parents=True)

    (root / USER_ID / "userfile.txt").write_bytes(USER_FILE_CONTENT)
    (root / USER_ID / "nested" / "nested-file.txt").write_bytes(NESTED_FILE_CONTENT)
    (root / ADMIN_ID / "adminfile.txt").write_bytes(ADMIN_FILE_CONTENT)
    return root


@pytest.fixture
def storage_root(storage_dir) -> StorageRoot:
    return StorageRoot.from_string(storage_dir)


@pytest.fixture
def path_resolver(storage_root) -> PathResolver:
    return PathResolver(storage_root)


@pytest.fixture
def access_evaluator(storage_root) -> AccessEvaluator:
    return AccessEvaluator(storage_root)


@pytest.fixture
def identity_provider(user_principal, admin_principal, other_principal) -> StubIdentityProvider:
    principals = {}
    for principal, secret in (
        (user_principal, "user-secret"),
        (admin_principal, "admin-secret"),
        (other_principal, "other-secret"),
    ):
        principals[f"{principal.id}:{secret}"] = principal
        principals[f"{principal.id}.{secret}"] = principal
    return StubIdentityProvider(principals)


@pytest.fixture
def settings(storage_dir) -> GatewaySettings:
    return GatewaySettings(storage_root=str(storage_dir), environment="test", max_upload_files=5)


@pytest.fixture
def client(settings, identity_provider):
    """Test client for an app bound to the seeded storage."""
    app = create_app(settings=settings, identity_provider=identity_provider)
    with TestClient(app) as test_client:
        yield test_client
