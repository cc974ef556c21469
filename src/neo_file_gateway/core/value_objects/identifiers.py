"""Value objects for identifiers in neo-file-gateway.

A principal id doubles as the name of its tenant partition directory, so
it must be a single, non-traversing path segment.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PrincipalId:
    """Opaque principal identifier (usually a UUID string)."""

    value: str

    MAX_LENGTH = 255
    FORBIDDEN_CHARS = {"/", "\\", "\0"}

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"PrincipalId must be a string, got {type(self.value).__name__}")

        value = self.value.strip()
        if not value:
            raise ValueError("PrincipalId cannot be empty")

        if value in {".", ".."}:
            raise ValueError(f"PrincipalId cannot be a relative path component: {value!r}")

        if self.FORBIDDEN_CHARS.intersection(value):
            raise ValueError("PrincipalId cannot contain path separators or null bytes")

        if len(value) > self.MAX_LENGTH:
            raise ValueError(f"PrincipalId too long: {len(value)} > {self.MAX_LENGTH}")

        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value
