"""Version information for neo-file-gateway."""

__version__ = "1.0.0"
