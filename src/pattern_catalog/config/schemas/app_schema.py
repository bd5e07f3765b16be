"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.base.exceptions import ConfigurationError

from .catalog_schema import CatalogConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a raw dictionary."""
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate a configuration dictionary.

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return AppConfig.model_validate(data or {})
    except PydanticValidationError as e:
        missing = [
            ".".join(str(part) for part in error["loc"])
            for error in e.errors()
            if error["type"] == "missing"
        ]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e
