"""Configuration loading from files and environment variables."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from pattern_catalog._package import ENV_PREFIX
from pattern_catalog.config.utils.env_expansion import expand_env_vars
from pattern_catalog.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> dotted configuration key
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": "logging.level",
    f"{ENV_PREFIX}LOG_DESTINATION": "logging.destination",
    f"{ENV_PREFIX}LOG_FILE": "logging.file_path",
    f"{ENV_PREFIX}HEADER_TEMPLATE": "catalog.header_template",
    f"{ENV_PREFIX}DEFAULT_FORMAT": "catalog.default_format",
}

DEFAULT_CONFIG_FILES = ("pattern_catalog.yml", "pattern_catalog.yaml", "pattern_catalog.json")


class ConfigurationLoader:
    """Loads raw configuration data from files and the environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file

        Returns:
            Raw configuration dictionary with environment references expanded

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                if file_path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration from %s", path)
        return expand_env_vars(data)

    def load_configuration(self, search_dir: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the first default file found, or return empty config."""
        base = Path(search_dir) if search_dir else Path.cwd()
        for name in DEFAULT_CONFIG_FILES:
            candidate = base / name
            if candidate.is_file():
                return self.load_from_file(str(candidate))
        logger.debug("No configuration file found in %s, using defaults", base)
        return {}

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERN_CATALOG_* environment overrides on top of file configuration."""
        result = {key: (dict(value) if isinstance(value, dict) else value)
                  for key, value in config_data.items()}
        for env_name, dotted_key in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if value is None or value == "":
                continue
            section, field = dotted_key.split(".", 1)
            result.setdefault(section, {})
            if not isinstance(result[section], dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
            result[section][field] = value
            logger.debug("Applied environment override %s -> %s", env_name, dotted_key)
        return result
