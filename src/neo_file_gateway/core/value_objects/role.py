"""Principal role value object."""

from enum import Enum


class Role(str, Enum):
    """Roles known to the gateway.

    Values match the role names returned by the identity service.
    """
    USER = "User"
    ADMIN = "Admin"

    @property
    def is_admin(self) -> bool:
        return self is Role.ADMIN
