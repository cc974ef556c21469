"""Core domain building blocks: exceptions and value objects."""
