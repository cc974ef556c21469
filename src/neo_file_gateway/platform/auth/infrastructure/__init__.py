"""Authentication infrastructure layer."""
