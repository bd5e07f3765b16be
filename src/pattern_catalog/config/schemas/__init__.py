"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .catalog_schema import OUTPUT_FORMATS, CatalogConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "CatalogConfig",
    "OUTPUT_FORMATS",
    "LoggingConfig",
]
