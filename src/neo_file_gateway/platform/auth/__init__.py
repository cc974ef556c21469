"""Authentication platform.

Principal model, credential extraction and the delegated identity check.
"""

from .core.entities import Principal
from .core.protocols import IdentityProvider
from .application.services import Authenticator, CredentialChannel, extract_credential
from .infrastructure.adapters import HttpIdentityProvider

__all__ = [
    "Principal",
    "IdentityProvider",
    "Authenticator",
    "CredentialChannel",
    "extract_credential",
    "HttpIdentityProvider",
]
