"""Identity provider adapters."""

from .http_identity_provider import HttpIdentityProvider

__all__ = ["HttpIdentityProvider"]
