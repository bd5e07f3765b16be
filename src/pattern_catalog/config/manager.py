"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.config.schemas import AppConfig

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access: the file (explicit or
    found in the working directory) is read, environment overrides are
    applied and the result is validated into an AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        if self._config_file:
            config_data = self.loader.load_from_file(self._config_file)
        else:
            config_data = self.loader.load_configuration()

        config_data = self.loader.apply_environment_overrides(config_data)
        return AppConfig.from_dict(config_data)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.to_dict()
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def to_dict(self) -> Dict[str, Any]:
        return self.app_config.model_dump(mode="json")

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None
        logger.debug("Configuration marked for reload")


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get the shared configuration manager.

    A new manager replaces the shared one when a different config path is given.
    """
    global _config_manager
    with _config_manager_lock:
        if _config_manager is None or (
            config_path is not None and config_path != _config_manager.config_file
        ):
            _config_manager = ConfigurationManager(config_path)
        return _config_manager
