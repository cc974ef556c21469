"""Credential extraction.

ONLY credential extraction - picks the bearer credential from the
Authorization header or the `bearer` query parameter, header first.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CredentialChannel(str, Enum):
    """Where the credential was supplied."""
    HEADER = "header"
    QUERY = "query"


@dataclass(frozen=True)
class ExtractedCredential:
    """Credential ready to be forwarded to the identity service."""

    value: str
    channel: CredentialChannel


def extract_credential(
    authorization: Optional[str],
    bearer: Optional[str],
) -> Optional[ExtractedCredential]:
    """Extract the bearer credential from a request.

    The header value is forwarded verbatim. A query value carries only the
    `<id>.<secret>` part and is wrapped into a `Bearer` header value.

    Args:
        authorization: Raw Authorization header value
        bearer: Raw `bearer` query parameter value

    Returns:
        The credential, or None if neither channel supplies one
    """
    if authorization and authorization.strip():
        return ExtractedCredential(authorization.strip(), CredentialChannel.HEADER)

    if bearer and bearer.strip():
        return ExtractedCredential(f"Bearer {bearer.strip()}", CredentialChannel.QUERY)

    return None
