"""Catalog application service."""
import io
import time
from contextlib import redirect_stdout
from typing import List, Optional, Union

from pattern_catalog.application.dto import DemoResult
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.domain.base.exceptions import DemoExecutionError
from pattern_catalog.domain.catalog.value_objects import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


class CatalogService:
    """
    Lists catalog patterns and runs their demos.

    Demos print their narration; the service captures it so callers can
    format or replay it.
    """

    def __init__(self, registry: PatternRegistry, config: Optional[AppConfig] = None):
        self._registry = registry
        self._config = config or AppConfig()
        self._logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self._config

    def list_patterns(
        self, category: Optional[Union[str, PatternCategory]] = None
    ) -> List[PatternInfo]:
        """List patterns of the enabled categories, optionally filtered by category."""
        enabled = set(self._config.catalog.categories)
        return [info for info in self._registry.list(category) if info.category in enabled]

    def get_pattern(self, slug: str) -> PatternInfo:
        return self._registry.get(slug)

    def run_demo(self, slug: str) -> DemoResult:
        """
        Run one demo and capture its narration.

        Raises:
            PatternNotFoundError: If the pattern is not registered
            DemoExecutionError: If the demo raises
        """
        info = self._registry.get(slug)
        self._logger.debug(f"Running demo: {info.slug}")

        buffer = io.StringIO()
        start_time = time.perf_counter()
        try:
            with redirect_stdout(buffer):
                info.demo()
        except Exception as e:
            self._logger.error(f"Demo {info.slug} failed: {str(e)}")
            raise DemoExecutionError(info.slug, str(e)) from e
        duration_ms = (time.perf_counter() - start_time) * 1000

        self._logger.debug(f"Completed demo: {info.slug} in {duration_ms:.3f}ms")
        return DemoResult.from_output(info, buffer.getvalue(), duration_ms)

    def run_all(
        self, category: Optional[Union[str, PatternCategory]] = None
    ) -> List[DemoResult]:
        """Run every demo in catalog order."""
        return [self.run_demo(info.slug) for info in self.list_patterns(category)]

    def render_transcript(self, results: List[DemoResult]) -> str:
        """Render results as a console transcript with one header per pattern."""
        sections = []
        for result in results:
            header = self._config.catalog.render_header(result.title)
            sections.append("\n".join([header] + result.lines))
        return "\n\n".join(sections)
