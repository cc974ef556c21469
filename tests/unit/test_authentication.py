"""Tests for credential extraction and request authentication."""

from unittest.mock import AsyncMock

import pytest

from neo_file_gateway.core.exceptions import (
    IdentityServiceUnavailable,
    InvalidCredentialsError,
    InvalidPrincipalError,
    MissingCredentialsError,
)
from neo_file_gateway.core.value_objects import Role
from neo_file_gateway.platform.auth import Authenticator, CredentialChannel, IdentityProvider, Principal, extract_credential

from conftest import USER_ID


class TestExtractCredential:

    def test_header_is_forwarded_verbatim(self):
        credential = extract_credential("Bearer abc:secret", None)
        assert credential.value == "Bearer abc:secret"
        assert credential.channel == CredentialChannel.HEADER

    def test_query_is_wrapped(self):
        credential = extract_credential(None, "abc.secret")
        assert credential.value == "Bearer abc.secret"
        assert credential.channel == CredentialChannel.QUERY

    def test_header_wins(self):
        credential = extract_credential("Bearer header:secret", "query.secret")
        assert credential.value == "Bearer header:secret"
        assert credential.channel == CredentialChannel.HEADER

    @pytest.mark.parametrize("authorization, bearer", [(None, None), ("", ""), ("  ", None)])
    def test_nothing_supplied(self, authorization, bearer):
        assert extract_credential(authorization, bearer) is None


class TestPrincipal:

    def test_create(self):
        principal = Principal.create(USER_ID, "Admin")
        assert principal.id.value == USER_ID
        assert principal.role is Role.ADMIN
        assert principal.is_admin

    def test_default_role_is_user(self):
        assert Principal.create(USER_ID).role is Role.USER

    def test_coerces_raw_values(self):
        principal = Principal(USER_ID, "User")
        assert principal.id.value == USER_ID
        assert not principal.is_admin

    def test_invalid_id(self):
        with pytest.raises(ValueError):
            Principal.create("../escape")


class TestAuthenticator:

    def test_stub_satisfies_protocol(self, identity_provider):
        assert isinstance(identity_provider, IdentityProvider)

    @pytest.mark.asyncio
    async def test_header_credential(self, identity_provider, user_principal):
        authenticator = Authenticator(identity_provider)
        principal = await authenticator.authenticate_request(authorization=f"Bearer {USER_ID}:user-secret")
        assert principal == user_principal
        assert identity_provider.calls == [f"Bearer {USER_ID}:user-secret"]

    @pytest.mark.asyncio
    async def test_query_credential(self, identity_provider, user_principal):
        authenticator = Authenticator(identity_provider)
        principal = await authenticator.authenticate_request(bearer=f"{USER_ID}.user-secret")
        assert principal == user_principal
        assert identity_provider.calls == [f"Bearer {USER_ID}.user-secret"]

    @pytest.mark.asyncio
    async def test_missing_credentials(self, identity_provider):
        with pytest.raises(MissingCredentialsError):
            await Authenticator(identity_provider).authenticate_request()
        assert identity_provider.calls == []

    @pytest.mark.asyncio
    async def test_rejected_header_credential_is_sanitized(self, identity_provider):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await Authenticator(identity_provider).authenticate_request(authorization="Bearer bad:token")
        assert exc_info.value.message == "Invalid Bearer token provided by header"
        assert exc_info.value.details == {}

    @pytest.mark.asyncio
    async def test_rejected_query_credential_is_sanitized(self, identity_provider):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await Authenticator(identity_provider).authenticate_request(bearer="bad.token")
        assert exc_info.value.message == "Invalid Bearer token provided by query"

    @pytest.mark.asyncio
    async def test_invalid_principal_payload(self):
        provider = AsyncMock()
        provider.authenticate.side_effect = InvalidPrincipalError(reason="missing uuid")
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await Authenticator(provider).authenticate_request(authorization="Bearer x:y")
        assert exc_info.value.message == "Invalid Bearer token provided by header"

    @pytest.mark.asyncio
    async def test_upstream_failure_is_sanitized_and_logged(self, caplog):
        provider = AsyncMock()
        provider.authenticate.side_effect = IdentityServiceUnavailable(reason="connection refused to 10.0.0.5")

        with pytest.raises(IdentityServiceUnavailable) as exc_info:
            await Authenticator(provider).authenticate_request(authorization="Bearer x:y")

        assert exc_info.value.message == "Invalid Bearer token provided by header"
        assert "10.0.0.5" not in exc_info.value.message
        assert any(record.levelname == "ERROR" for record in caplog.records)

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_authentication_error(self):
        provider = AsyncMock()
        provider.authenticate.side_effect = RuntimeError("driver exploded")

        with pytest.raises(IdentityServiceUnavailable) as exc_info:
            await Authenticator(provider).authenticate_request(bearer="x.y")

        assert exc_info.value.message == "Invalid Bearer token provided by query"

    @pytest.mark.asyncio
    async def test_non_principal_result_is_rejected(self):
        provider = AsyncMock()
        provider.authenticate.return_value = {"uuid": USER_ID}

        with pytest.raises(InvalidCredentialsError):
            await Authenticator(provider).authenticate_request(authorization="Bearer x:y")
