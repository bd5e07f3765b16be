"""Catalog presentation configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from pattern_catalog.domain.catalog.value_objects import PatternCategory

OUTPUT_FORMATS = ["text", "json", "yaml", "table", "list"]


class CatalogConfig(BaseModel):
    """Catalog configuration."""

    header_template: str = Field(
        "=== {title} Pattern ===", description="Header printed before each demo"
    )
    default_format: str = Field("text", description="Default CLI output format")
    categories: List[PatternCategory] = Field(
        default_factory=lambda: list(PatternCategory),
        description="Categories available to the CLI",
    )

    @field_validator("header_template")
    @classmethod
    def validate_header_template(cls, v: str) -> str:
        """Header template must reference the pattern title."""
        if "{title}" not in v:
            raise ValueError("header_template must contain '{title}'")
        return v

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate default output format."""
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v

    def render_header(self, title: str) -> str:
        return self.header_template.format(title=title)
