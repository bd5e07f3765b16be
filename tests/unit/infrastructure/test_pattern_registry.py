"""Tests for the pattern registry."""

from unittest.mock import Mock

import pytest

from pattern_catalog.domain.base.exceptions import (
    PatternNotFoundError,
    UnsupportedCategoryError,
)
from pattern_catalog.domain.catalog.value_objects import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    get_pattern_registry,
)
from pattern_catalog.infrastructure.registry.registration import (
    PATTERN_DEFINITIONS,
    register_all_patterns,
)


class TestPatternRegistry:
    """Test pattern registry functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = PatternRegistry()
        self.demo = Mock()
        self.info = PatternInfo(
            slug="factory-method",
            title="Factory Method",
            category=PatternCategory.CREATIONAL,
            demo=self.demo,
        )

    def test_register_and_get(self):
        self.registry.register(self.info)

        assert self.registry.is_registered("factory-method")
        assert self.registry.get("factory-method") is self.info
        assert self.registry.get_registered_slugs() == ["factory-method"]

    def test_duplicate_registration(self):
        self.registry.register(self.info)

        with pytest.raises(ValueError, match="Pattern 'factory-method' is already registered"):
            self.registry.register(self.info)

    @pytest.mark.parametrize("name", ["Factory Method", "factory_method", "FACTORY-METHOD"])
    def test_lookup_is_normalized(self, name):
        self.registry.register(self.info)
        assert self.registry.get(name) is self.info

    def test_unknown_pattern(self):
        with pytest.raises(PatternNotFoundError) as exc_info:
            self.registry.get("monostate")
        assert exc_info.value.slug == "monostate"

    def test_unregister(self):
        self.registry.register(self.info)

        assert self.registry.unregister("factory-method")
        assert not self.registry.unregister("factory-method")
        assert len(self.registry) == 0

    def test_clear_registrations(self):
        self.registry.register(self.info)
        self.registry.clear_registrations()
        assert self.registry.get_registered_slugs() == []

    def test_get_instance_is_shared(self):
        assert PatternRegistry.get_instance() is PatternRegistry.get_instance()
        assert get_pattern_registry() is PatternRegistry.get_instance()


class TestRegistration:
    """Test catalog registration."""

    def test_all_patterns_registered_in_catalog_order(self, registry):
        slugs = registry.get_registered_slugs()

        assert len(slugs) == 23
        assert slugs[0] == "singleton"
        assert slugs[-1] == "visitor"
        assert slugs == [definition[0] for definition in PATTERN_DEFINITIONS]

    def test_registration_is_idempotent(self, registry):
        register_all_patterns(registry)
        assert len(registry) == 23

    @pytest.mark.parametrize("category, count", [
        ("creational", 5),
        ("structural", 7),
        (PatternCategory.BEHAVIORAL, 11),
        (" Structural ", 7),
    ])
    def test_list_by_category(self, registry, category, count):
        patterns = registry.list(category)
        assert len(patterns) == count
        assert {p.category for p in patterns} == {PatternCategory.from_str(category)}

    def test_list_unknown_category(self, registry):
        with pytest.raises(UnsupportedCategoryError, match="Unsupported pattern category 'concurrency'"):
            registry.list("concurrency")

    def test_every_demo_is_callable(self, registry):
        for info in registry.list():
            assert callable(info.demo)
            assert info.summary
