from .product import Product, display_price
from .catalog import Catalog, DuplicateProductError, default_catalog, filter_below

__all__ = [
    "Product",
    "display_price",
    "Catalog",
    "DuplicateProductError",
    "default_catalog",
    "filter_below",
]
