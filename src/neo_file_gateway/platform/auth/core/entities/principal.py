"""Principal entity."""

from dataclasses import dataclass
from typing import Union

from .....core.value_objects import PrincipalId, Role


@dataclass(frozen=True)
class Principal:
    """An authenticated caller.

    Built once per request by the identity provider and never persisted.
    """

    id: PrincipalId
    role: Role = Role.USER

    def __post_init__(self):
        if isinstance(self.id, str):
            object.__setattr__(self, "id", PrincipalId(self.id))
        if not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role(self.role))

    @classmethod
    def create(cls, principal_id: str, role: Union[Role, str] = Role.USER) -> "Principal":
        """Create principal from raw identity values."""
        return cls(id=PrincipalId(principal_id), role=Role(role))

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin

    def __str__(self) -> str:
        return f"{self.id.value} ({self.role.value})"
