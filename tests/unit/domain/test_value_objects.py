"""Tests for catalog value objects."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.base.exceptions import UnsupportedCategoryError
from pattern_catalog.domain.catalog.value_objects import (
    PatternCategory,
    PatternInfo,
    normalize_slug,
)


class TestNormalizeSlug:
    @pytest.mark.parametrize("value, expected", [
        ("Chain of Responsibility", "chain-of-responsibility"),
        ("template_method", "template-method"),
        ("  Abstract   Factory ", "abstract-factory"),
        ("proxy", "proxy"),
    ])
    def test_normalize(self, value, expected):
        assert normalize_slug(value) == expected


class TestPatternCategory:
    def test_from_str(self):
        assert PatternCategory.from_str("Behavioral") is PatternCategory.BEHAVIORAL
        assert PatternCategory.from_str(PatternCategory.CREATIONAL) is PatternCategory.CREATIONAL

    def test_from_str_unknown(self):
        with pytest.raises(UnsupportedCategoryError) as exc_info:
            PatternCategory.from_str("architectural")
        assert exc_info.value.category == "architectural"
        assert exc_info.value.supported == ["creational", "structural", "behavioral"]


class TestPatternInfo:
    def test_slug_is_normalized(self):
        info = PatternInfo(slug="Template Method", title="Template Method",
                           category="behavioral", demo=lambda: None)
        assert info.slug == "template-method"
        assert info.category is PatternCategory.BEHAVIORAL

    def test_empty_slug_rejected(self):
        with pytest.raises(PydanticValidationError):
            PatternInfo(slug="  ", title="x", category="behavioral", demo=lambda: None)

    def test_to_dict_excludes_demo(self):
        info = PatternInfo(slug="proxy", title="Proxy", category="structural",
                           summary="s", demo=lambda: None)
        assert info.to_dict() == {
            "slug": "proxy",
            "title": "Proxy",
            "category": "structural",
            "summary": "s",
        }

    def test_is_frozen(self):
        info = PatternInfo(slug="proxy", title="Proxy", category="structural", demo=lambda: None)
        with pytest.raises(PydanticValidationError):
            info.title = "Other"
