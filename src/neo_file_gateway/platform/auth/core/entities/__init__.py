"""Authentication core entities."""

from .principal import Principal

__all__ = ["Principal"]
