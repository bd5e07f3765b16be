"""Pattern registry package."""

from .pattern_registry import PatternRegistry, get_pattern_registry
from .registration import PATTERN_DEFINITIONS, register_all_patterns

__all__ = [
    "PatternRegistry",
    "get_pattern_registry",
    "PATTERN_DEFINITIONS",
    "register_all_patterns",
]
