"""File platform services."""

from .access_evaluator import AccessEvaluator
from .path_resolver import PathResolver, resolve_location

__all__ = ["AccessEvaluator", "PathResolver", "resolve_location"]
