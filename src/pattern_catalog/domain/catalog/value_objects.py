"""Catalog value objects."""
from enum import Enum
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pattern_catalog.domain.base.exceptions import UnsupportedCategoryError


class PatternCategory(str, Enum):
    """Classic grouping of the design patterns."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @classmethod
    def from_str(cls, value: Union[str, "PatternCategory"]) -> "PatternCategory":
        """Parse a category, raising UnsupportedCategoryError for unknown strings."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedCategoryError(str(value), [c.value for c in cls])


def normalize_slug(value: str) -> str:
    """Normalize a pattern name to its slug: 'Chain of_Responsibility' -> 'chain-of-responsibility'."""
    return "-".join(value.strip().lower().replace("_", " ").replace("-", " ").split())


class PatternInfo(BaseModel):
    """Catalog entry describing one pattern and its demo."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    slug: str
    title: str
    category: PatternCategory
    summary: str = ""
    demo: Callable[[], None] = Field(exclude=True)

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Store slugs in their normalized form."""
        slug = normalize_slug(v)
        if not slug:
            raise ValueError("Pattern slug must not be empty")
        return slug

    def to_dict(self) -> dict:
        return {
            "slug": self.slug,
            "title": self.title,
            "category": self.category.value,
            "summary": self.summary,
        }
