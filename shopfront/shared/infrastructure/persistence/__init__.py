"""Persistence adapters (JSON files)."""

from .records import (
    cart_from_records,
    cart_to_records,
    products_from_records,
    products_to_records,
)
from .cart_repository import CartRepository

__all__ = [
    "CartRepository",
    "cart_from_records",
    "cart_to_records",
    "products_from_records",
    "products_to_records",
]
