"""Pattern Registry - registry pattern for the catalog's pattern demos.

Patterns are registered with their metadata and demo callable, and looked
up by slug. New patterns are added by registering them, without touching
the code that lists or runs them.
"""

import threading
from typing import Dict, List, Optional, Union

from pattern_catalog.domain.base.exceptions import PatternNotFoundError
from pattern_catalog.domain.catalog.value_objects import (
    PatternCategory,
    PatternInfo,
    normalize_slug,
)
from pattern_catalog.infrastructure.logging.logger import get_logger


class PatternRegistry:
    """
    Registry of catalog patterns.

    Keeps registration order, which is the order patterns are listed and run.

    Thread-safe singleton implementation.
    """

    _instance: Optional["PatternRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternInfo] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "PatternRegistry":
        """Get singleton instance of pattern registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register(self, info: PatternInfo) -> None:
        """
        Register a pattern.

        Args:
            info: Pattern metadata and demo

        Raises:
            ValueError: If the slug is already registered
        """
        with self._registration_lock:
            if info.slug in self._registrations:
                raise ValueError(f"Pattern '{info.slug}' is already registered")

            self._registrations[info.slug] = info
            self._logger.debug(f"Registered pattern: {info.slug} ({info.category.value})")

    def unregister(self, slug: str) -> bool:
        """
        Unregister a pattern.

        Returns:
            True if the pattern was unregistered, False if not found
        """
        with self._registration_lock:
            key = normalize_slug(slug)
            if key in self._registrations:
                del self._registrations[key]
                self._logger.debug(f"Unregistered pattern: {key}")
                return True
            return False

    def is_registered(self, slug: str) -> bool:
        return normalize_slug(slug) in self._registrations

    def get(self, slug: str) -> PatternInfo:
        """
        Get a registered pattern.

        Args:
            slug: Pattern slug or name, e.g. 'factory-method' or 'Factory Method'

        Raises:
            PatternNotFoundError: If no pattern is registered under the slug
        """
        key = normalize_slug(slug)
        try:
            return self._registrations[key]
        except KeyError:
            raise PatternNotFoundError(slug)

    def list(
        self, category: Optional[Union[str, PatternCategory]] = None
    ) -> List[PatternInfo]:
        """
        List registered patterns in registration order.

        Raises:
            UnsupportedCategoryError: If category is not a known category
        """
        patterns = list(self._registrations.values())
        if category is None:
            return patterns
        wanted = PatternCategory.from_str(category)
        return [info for info in patterns if info.category == wanted]

    def get_registered_slugs(self) -> List[str]:
        return list(self._registrations.keys())

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._registration_lock:
            self._registrations.clear()
            self._logger.debug("Cleared all pattern registrations")

    def __len__(self) -> int:
        return len(self._registrations)


def get_pattern_registry() -> PatternRegistry:
    """Get the global pattern registry instance."""
    return PatternRegistry.get_instance()
