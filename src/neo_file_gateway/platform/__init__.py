"""Feature platforms of the file gateway."""
