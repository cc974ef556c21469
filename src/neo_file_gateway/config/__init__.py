"""Configuration for neo-file-gateway: settings and logging."""

from .logging_config import LoggingConfig, setup_logging
from .settings import GatewaySettings, get_settings, load_environment

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "GatewaySettings",
    "get_settings",
    "load_environment",
]
