"""Application layer: demo registration and the catalog service."""

from .catalog_service import CatalogService
from .registration import register_all_demos

__all__ = ["CatalogService", "register_all_demos"]
