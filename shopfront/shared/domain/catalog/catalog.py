"""Ordered, read-only product catalog and the price filter."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, Iterator, List, Optional, Tuple, overload

from .product import Product


class DuplicateProductError(ValueError):
    """Raised when two products in one collection share an id."""

    def __init__(self, product_id: str):
        super().__init__(f"duplicate product id: {product_id!r}")
        self.product_id = product_id


def filter_below(products: Iterable[Product], threshold: int) -> List[Product]:
    """Return the products priced strictly below ``threshold``, in input order."""
    return [product for product in products if product.price < threshold]


class Catalog(Sequence):
    """Immutable ordered sequence of products; order is display order."""

    __slots__ = ("_products", "_index")

    def __init__(self, products: Iterable[Product] = ()):
        items: Tuple[Product, ...] = tuple(products)
        index = {}
        for product in items:
            if not isinstance(product, Product):
                raise TypeError(f"catalog entries must be Product, got {type(product).__name__}")
            if product.id in index:
                raise DuplicateProductError(product.id)
            index[product.id] = product
        self._products = items
        self._index = index

    @overload
    def __getitem__(self, position: int) -> Product: ...

    @overload
    def __getitem__(self, position: slice) -> Tuple[Product, ...]: ...

    def __getitem__(self, position):
        return self._products[position]

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Catalog):
            return self._products == other._products
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._products)

    def __repr__(self) -> str:
        return f"Catalog({len(self._products)} products)"

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(product.id for product in self._products)

    def get(self, product_id: str) -> Optional[Product]:
        return self._index.get(product_id)

    def below(self, threshold: int) -> List[Product]:
        return filter_below(self._products, threshold)


def default_catalog() -> Catalog:
    """Build the demo catalog shipped with the app (prices in cents)."""
    return Catalog([
        Product(id="1", title="Groovy Shorts", price=1200, image="assets/products/shorts.png"),
        Product(id="2", title="Karati Kit", price=3400, image="assets/products/karati.png"),
        Product(id="3", title="Denim Jeans", price=5400, image="assets/products/jeans.png"),
        Product(id="4", title="Red Backpack", price=1400, image="assets/products/backpack.png"),
        Product(id="5", title="Drum & Sticks", price=2900, image="assets/products/drum.png"),
        Product(id="6", title="Blue Suitcase", price=4400, image="assets/products/suitcase.png"),
        Product(id="7", title="Roller Skates", price=5200, image="assets/products/skates.png"),
        Product(id="8", title="Electric Guitar", price=7900, image="assets/products/guitar.png"),
    ])
