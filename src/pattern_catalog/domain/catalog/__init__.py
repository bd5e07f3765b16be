"""Catalog bounded context - pattern metadata."""

from .value_objects import PatternCategory, PatternInfo, normalize_slug

__all__ = ["PatternCategory", "PatternInfo", "normalize_slug"]
