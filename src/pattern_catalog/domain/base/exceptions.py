"""Domain exceptions - base classes for all catalog errors."""
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnsupportedProductError(ValidationError):
    """Raised when a factory is asked for a kind of product it cannot make."""
    def __init__(self, kind: str, supported: Iterable[str]):
        self.kind = kind
        self.supported = sorted(supported)
        super().__init__(
            f"Unsupported product kind '{kind}'. Supported kinds: {', '.join(self.supported)}",
            {"kind": kind, "supported": self.supported},
        )


class UnsupportedCategoryError(ValidationError):
    """Raised when a pattern category string is not recognized."""
    def __init__(self, category: str, supported: Optional[Iterable[str]] = None):
        self.category = category
        self.supported = list(supported or [])
        message = f"Unsupported pattern category '{category}'"
        if self.supported:
            message += f". Supported categories: {', '.join(self.supported)}"
        super().__init__(message, {"category": category})


class UnknownVariableError(ValidationError):
    """Raised when an expression refers to a variable missing from its context."""
    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is not defined in the context", {"name": name})
        self.name = name


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern is not in the catalog."""
    def __init__(self, slug: str):
        super().__init__(f"Pattern '{slug}' not found")
        self.slug = slug


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class DemoExecutionError(DomainException):
    """Raised when a pattern demo fails while running."""
    def __init__(self, slug: str, message: str):
        super().__init__(f"Demo '{slug}' failed: {message}")
        self.slug = slug
