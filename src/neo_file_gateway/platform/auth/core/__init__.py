"""Authentication core: entities and protocols."""

from .entities import Principal
from .protocols import IdentityProvider

__all__ = ["Principal", "IdentityProvider"]
