"""Configuration package with clean public API."""

from .schemas import AppConfig, CatalogConfig, LoggingConfig, OUTPUT_FORMATS, validate_config
from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    "AppConfig",
    "validate_config",
    "CatalogConfig",
    "LoggingConfig",
    "OUTPUT_FORMATS",
    "ConfigurationLoader",
    "ConfigurationManager",
    "get_config_manager",
]
