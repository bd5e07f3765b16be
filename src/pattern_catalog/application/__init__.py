"""Application layer - catalog use cases."""

from .dto import DemoResult
from .service import CatalogService

__all__ = ["DemoResult", "CatalogService"]
