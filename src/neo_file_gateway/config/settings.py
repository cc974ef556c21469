"""
Application settings and configuration management.

Process-lifetime configuration for the file gateway, loaded from the
environment (and optional .env files) with pydantic-settings.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENVIRONMENTS = ("production", "test", "development")


class GatewaySettings(BaseSettings):
    """File gateway settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Core Application Settings
    app_name: str = Field(default="NeoFileGateway")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENV", "ENVIRONMENT", "environment"),
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: Optional[int] = Field(default=None, description="Falls back to 8080 in production, 8070 otherwise")

    # Storage Configuration
    storage_root: str = Field(
        validation_alias=AliasChoices("STORAGE_ROOT", "UPLOAD_DIR", "storage_root"),
        min_length=1,
        description="Directory that holds every tenant partition",
    )
    max_upload_files: int = Field(default=5, ge=1, description="Maximum files accepted per upload request")
    archive_spool_bytes: int = Field(
        default=8 * 1024 * 1024,
        ge=0,
        description="Zip archives larger than this spill from memory to a temporary file",
    )

    # Identity Service Configuration
    identity_service_url: str = Field(
        default="http://localhost:8080",
        validation_alias=AliasChoices("IDENTITY_SERVICE_URL", "BACKEND_HOST", "identity_service_url"),
    )
    identity_timeout_seconds: float = Field(default=10.0, gt=0)

    # CORS Configuration
    cors_origins: List[str] = Field(default=["*"])

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_environment(cls, value: Any) -> str:
        normalized = str(value or "").strip().lower()
        return normalized if normalized in ENVIRONMENTS else "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    @property
    def effective_port(self) -> int:
        """Port to listen on."""
        if self.port is not None:
            return self.port
        return 8080 if self.is_production else 8070

    def get_service_specific_config(self) -> Dict[str, Any]:
        """Get a loggable summary of the gateway configuration."""
        return {
            "service_name": self.app_name,
            "environment": self.environment,
            "storage_root": self.storage_root,
            "identity_service_url": self.identity_service_url,
            "max_upload_files": self.max_upload_files,
        }


def load_environment(project_root: Optional[Path] = None) -> None:
    """Load .env first, then .env.local as local overrides."""
    root = project_root or Path.cwd()

    env_file = root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        logger.info(f"Loaded environment variables from {env_file}")

    env_local_file = root / ".env.local"
    if env_local_file.exists():
        load_dotenv(env_local_file, override=True)
        logger.info(f"Loaded local environment overrides from {env_local_file}")


@lru_cache()
def get_settings() -> GatewaySettings:
    """Get cached settings instance."""
    load_environment()
    return GatewaySettings()
