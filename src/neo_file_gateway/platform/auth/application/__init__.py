"""Authentication application layer."""
