"""Core value objects for neo-file-gateway."""

from .identifiers import PrincipalId
from .role import Role
from .storage_root import StorageRoot

__all__ = [
    "PrincipalId",
    "Role",
    "StorageRoot",
]
