"""Authentication application services."""

from .authenticator import Authenticator
from .credential_extractor import CredentialChannel, ExtractedCredential, extract_credential

__all__ = [
    "Authenticator",
    "CredentialChannel",
    "ExtractedCredential",
    "extract_credential",
]
