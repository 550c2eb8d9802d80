"""
Shopfront Domain
================

Business logic with no UI or I/O:
- catalog: Product records, the ordered Catalog and the price filter
- cart: the id-keyed Cart store
"""

from .catalog import Catalog, Product, default_catalog, display_price, filter_below
from .cart import Cart, CartLoadError

__all__ = [
    "Catalog",
    "Product",
    "default_catalog",
    "display_price",
    "filter_below",
    "Cart",
    "CartLoadError",
]
