"""Flat record (de)serialization for products and carts.

A product is stored as ``{id, title, price, image}`` and a cart as a JSON
array of such records.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from shopfront.shared.domain.cart import Cart, CartLoadError
from shopfront.shared.domain.catalog import Product


def products_to_records(products: Iterable[Product]) -> List[Dict[str, Any]]:
    return [product.to_record() for product in products]


def products_from_records(records: Iterable[Dict[str, Any]]) -> List[Product]:
    """Validate every record into a Product; the first bad record raises."""
    return [Product.from_record(record) for record in records]


def cart_to_records(cart: Cart) -> List[Dict[str, Any]]:
    # Sorted by id so saved files diff cleanly; cart order carries no meaning
    return products_to_records(sorted(cart, key=lambda product: product.id))


def cart_from_records(records: Any) -> Cart:
    """Build a cart from a list of records, rejecting duplicate ids.

    Raises:
        CartLoadError: If the data is not a list, a record is malformed,
            or two records share an id
    """
    if not isinstance(records, list):
        raise CartLoadError(f"cart data must be a list of records, got {type(records).__name__}")

    try:
        products = products_from_records(records)
    except ValidationError as e:
        raise CartLoadError(f"invalid cart record: {e}") from e

    cart = Cart()
    for product in products:
        if not cart.add(product):
            raise CartLoadError(f"duplicate product id in cart data: {product.id!r}")
    return cart
