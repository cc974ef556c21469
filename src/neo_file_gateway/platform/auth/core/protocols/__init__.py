"""Authentication core protocols."""

from .identity_provider import IdentityProvider

__all__ = ["IdentityProvider"]
