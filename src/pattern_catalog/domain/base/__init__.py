"""Base domain layer - shared kernel for the catalog."""

from .exceptions import (
    ConfigurationError,
    DemoExecutionError,
    DomainException,
    PatternNotFoundError,
    UnknownVariableError,
    UnsupportedCategoryError,
    UnsupportedProductError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "UnsupportedProductError",
    "UnsupportedCategoryError",
    "UnknownVariableError",
    "PatternNotFoundError",
    "ConfigurationError",
    "DemoExecutionError",
]
