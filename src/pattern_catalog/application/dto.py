"""Data transfer objects for catalog results."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.domain.catalog.value_objects import PatternCategory, PatternInfo


class DemoResult(BaseModel):
    """Narration captured from one demo run."""
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    category: PatternCategory
    lines: List[str] = Field(default_factory=list)
    duration_ms: float = 0.0

    @classmethod
    def from_output(cls, info: PatternInfo, output: str, duration_ms: float) -> "DemoResult":
        """Build a result from raw captured stdout."""
        # A trailing newline terminates the last line; it does not start a new one
        lines = output.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls(
            slug=info.slug,
            title=info.title,
            category=info.category,
            lines=lines,
            duration_ms=duration_ms,
        )

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
