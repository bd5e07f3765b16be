"""Tests for the catalog service."""

from unittest.mock import Mock

import pytest

from pattern_catalog.application.dto import DemoResult
from pattern_catalog.application.service import CatalogService
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.domain.base.exceptions import DemoExecutionError, PatternNotFoundError
from pattern_catalog.domain.catalog.value_objects import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


class TestCatalogService:
    """Test catalog service operations."""

    def test_run_demo_captures_narration(self, registry, capsys):
        service = CatalogService(registry)

        result = service.run_demo("singleton")

        assert isinstance(result, DemoResult)
        assert result.slug == "singleton"
        assert result.title == "Singleton"
        assert result.category is PatternCategory.CREATIONAL
        assert result.lines == ["Are instances the same? True"]
        assert result.duration_ms >= 0
        # Narration is captured, not printed
        assert capsys.readouterr().out == ""

    def test_run_demo_keeps_blank_lines(self, registry):
        result = CatalogService(registry).run_demo("facade")
        assert result.lines[0] == "Client: Using facade"
        assert result.lines[-1] == ""
        assert result.output.endswith("Subsystem2: Fire!\n")

    def test_run_demo_unknown_pattern(self, registry):
        with pytest.raises(PatternNotFoundError):
            CatalogService(registry).run_demo("monostate")

    def test_run_demo_wraps_failures(self):
        registry = PatternRegistry()
        failing = Mock(side_effect=RuntimeError("boom"))
        registry.register(PatternInfo(slug="broken", title="Broken",
                                      category="behavioral", demo=failing))

        with pytest.raises(DemoExecutionError, match="Demo 'broken' failed: boom") as exc_info:
            CatalogService(registry).run_demo("broken")

        assert exc_info.value.slug == "broken"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_run_all_in_catalog_order(self, registry):
        results = CatalogService(registry).run_all()
        assert [r.slug for r in results] == registry.get_registered_slugs()

    def test_run_all_by_category(self, registry):
        results = CatalogService(registry).run_all("creational")
        assert [r.slug for r in results] == [
            "singleton", "factory-method", "abstract-factory", "builder", "prototype",
        ]

    def test_list_and_get(self, registry):
        service = CatalogService(registry)
        assert len(service.list_patterns()) == 23
        assert len(service.list_patterns(PatternCategory.STRUCTURAL)) == 7
        assert service.get_pattern("Chain of Responsibility").slug == "chain-of-responsibility"

    def test_list_only_enabled_categories(self, registry):
        config = AppConfig.from_dict({"catalog": {"categories": ["creational", "behavioral"]}})
        service = CatalogService(registry, config)

        assert len(service.list_patterns()) == 16
        assert service.list_patterns("structural") == []
        assert len(service.run_all()) == 16
        # Explicit lookups are not restricted
        assert service.get_pattern("bridge").slug == "bridge"

    def test_render_transcript(self, registry):
        service = CatalogService(registry)
        results = [service.run_demo("singleton"), service.run_demo("prototype")]

        assert service.render_transcript(results) == (
            "=== Singleton Pattern ===\n"
            "Are instances the same? True\n"
            "\n"
            "=== Prototype Pattern ===\n"
            "Original object id: 1\n"
            "Cloned object id: 1"
        )

    def test_render_transcript_uses_configured_header(self, registry):
        config = AppConfig.from_dict({"catalog": {"header_template": "# {title}"}})
        service = CatalogService(registry, config)

        transcript = service.render_transcript([service.run_demo("singleton")])

        assert transcript.splitlines()[0] == "# Singleton"


class TestDemoResult:
    def test_from_output_drops_only_final_newline(self):
        info = PatternInfo(slug="x", title="X", category="creational", demo=lambda: None)
        result = DemoResult.from_output(info, "a\n\nb\n", 1.5)
        assert result.lines == ["a", "", "b"]

    def test_from_empty_output(self):
        info = PatternInfo(slug="x", title="X", category="creational", demo=lambda: None)
        assert DemoResult.from_output(info, "", 0.0).lines == []

    def test_to_dict(self):
        info = PatternInfo(slug="x", title="X", category="creational", demo=lambda: None)
        data = DemoResult.from_output(info, "a\n", 2.0).to_dict()
        assert data == {
            "slug": "x",
            "title": "X",
            "category": "creational",
            "lines": ["a"],
            "duration_ms": 2.0,
        }
