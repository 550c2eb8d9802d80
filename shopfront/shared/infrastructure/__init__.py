"""
Shared Infrastructure
=====================

Technical adapters: catalog sources (file / HTTP) and JSON persistence.
"""

from .persistence import CartRepository
from .catalog_source import (
    CatalogLoadError,
    CatalogLoadState,
    CatalogSource,
    LoadStatus,
    parse_catalog,
)

__all__ = [
    "CartRepository",
    "CatalogLoadError",
    "CatalogLoadState",
    "CatalogSource",
    "LoadStatus",
    "parse_catalog",
]
