"""Application bootstrap - wires configuration, logging and the catalog."""

from __future__ import annotations

from typing import Optional

from pattern_catalog.application.service import CatalogService
from pattern_catalog.config.manager import ConfigurationManager, get_config_manager
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    get_pattern_registry,
)
from pattern_catalog.infrastructure.registry.registration import register_all_patterns


class Application:
    """Application context with lazy initialization."""

    def __init__(self, config_path: Optional[str] = None,
                 registry: Optional[PatternRegistry] = None,
                 config_manager: Optional[ConfigurationManager] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._initialized = False
        self._registry = registry
        self._config_manager = config_manager
        self._catalog_service: Optional[CatalogService] = None

        # Only create logger immediately (lightweight)
        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager

    @property
    def config(self) -> AppConfig:
        return self.config_manager.app_config

    def initialize(self, log_level: Optional[str] = None) -> bool:
        """Load configuration, set up logging and register all patterns."""
        if self._initialized:
            return True

        logging_config = self.config.logging
        if log_level:
            logging_config = logging_config.model_copy(update={"level": log_level.upper()})
        setup_logging(logging_config)

        if self._registry is None:
            self._registry = get_pattern_registry()
        register_all_patterns(self._registry)

        self._catalog_service = CatalogService(self._registry, self.config)
        self._initialized = True
        self.logger.info(f"Application initialized with {len(self._registry)} patterns")
        return True

    @property
    def catalog_service(self) -> CatalogService:
        if not self._initialized:
            self.initialize()
        return self._catalog_service


def create_application(config_path: Optional[str] = None,
                       log_level: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    app = Application(config_path)
    app.initialize(log_level=log_level)
    return app
