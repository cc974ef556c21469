"""Tests for gateway settings."""

import os

import pytest

from neo_file_gateway.config.settings import GatewaySettings, load_environment


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for name in (
        "ENV", "ENVIRONMENT", "PORT", "STORAGE_ROOT", "UPLOAD_DIR",
        "IDENTITY_SERVICE_URL", "BACKEND_HOST", "MAX_UPLOAD_FILES",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestGatewaySettings:

    def test_defaults(self, tmp_path):
        settings = GatewaySettings(storage_root=str(tmp_path))
        assert settings.environment == "development"
        assert settings.max_upload_files == 5
        assert settings.identity_timeout_seconds == 10.0
        assert settings.effective_port == 8070

    def test_production_port(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENV", "production")
        monkeypatch.setenv("STORAGE_ROOT", str(tmp_path))
        settings = GatewaySettings()
        assert settings.is_production
        assert settings.effective_port == 8080

    def test_explicit_port(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "9000")
        settings = GatewaySettings(storage_root=str(tmp_path))
        assert settings.effective_port == 9000

    def test_unknown_environment_falls_back(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENV", "staging")
        settings = GatewaySettings(storage_root=str(tmp_path))
        assert settings.environment == "development"

    def test_legacy_aliases(self, monkeypatch, tmp_path):
        monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
        monkeypatch.setenv("BACKEND_HOST", "http://backend:8080")
        settings = GatewaySettings()
        assert settings.storage_root == str(tmp_path)
        assert settings.identity_service_url == "http://backend:8080"

    def test_storage_root_is_required(self):
        with pytest.raises(ValueError):
            GatewaySettings()

    def test_empty_storage_root_is_rejected(self, monkeypatch):
        monkeypatch.setenv("STORAGE_ROOT", "")
        with pytest.raises(ValueError):
            GatewaySettings()

    def test_test_environment(self, tmp_path):
        settings = GatewaySettings(storage_root=str(tmp_path), environment="test")
        assert settings.is_testing
        assert not settings.is_production


def test_load_environment_local_overrides(monkeypatch, tmp_path):
    for name in ("STORAGE_ROOT", "IDENTITY_SERVICE_URL"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    (tmp_path / ".env").write_text("STORAGE_ROOT=/from/env\nIDENTITY_SERVICE_URL=http://env\n")
    (tmp_path / ".env.local").write_text("STORAGE_ROOT=/from/local\n")

    load_environment(tmp_path)

    assert os.environ["STORAGE_ROOT"] == "/from/local"
    assert os.environ["IDENTITY_SERVICE_URL"] == "http://env"
