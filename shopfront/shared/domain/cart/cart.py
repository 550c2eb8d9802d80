"""Cart store: a set of products keyed by id."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, Iterator, List, Mapping

from shopfront.shared.domain.catalog import Product

logger = logging.getLogger(__name__)

CartListener = Callable[[Mapping[str, Product]], None]


class CartLoadError(ValueError):
    """Raised when persisted cart data cannot be turned into a cart."""


class Cart:
    """Mutable set of distinct products, unique by ``Product.id``.

    Every effective mutation swaps in a new id -> product mapping, so a
    snapshot taken from ``items`` never changes afterwards. Listeners
    registered with ``subscribe`` receive that new snapshot synchronously;
    calls that leave the cart unchanged notify nobody.
    """

    def __init__(self, products: Iterable[Product] = ()):
        self._items: Mapping[str, Product] = MappingProxyType({})
        self._listeners: List[CartListener] = []
        for product in products:
            self.add(product)

    # --- Queries ---

    @property
    def items(self) -> Mapping[str, Product]:
        """Read-only snapshot of the id -> product mapping."""
        return self._items

    @property
    def products(self) -> FrozenSet[Product]:
        return frozenset(self._items.values())

    def contains(self, product_id: str) -> bool:
        return product_id in self._items

    def total(self) -> int:
        """Sum of member prices; 0 for an empty cart."""
        return sum(product.price for product in self._items.values())

    def count(self) -> int:
        return len(self._items)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items.values())

    def __repr__(self) -> str:
        return f"Cart(count={self.count()}, total={self.total()})"

    # --- Mutations ---

    def add(self, product: Product) -> bool:
        """Add ``product`` unless a member already has its id.

        Returns True when the cart changed.
        """
        if product.id in self._items:
            logger.debug(f"Cart already holds product {product.id!r}; add ignored")
            return False
        updated: Dict[str, Product] = dict(self._items)
        updated[product.id] = product
        self._replace(updated)
        logger.debug(f"Added product {product.id!r} to cart")
        return True

    def remove(self, product_id: str) -> bool:
        """Remove the member with ``product_id`` if present.

        Returns True when the cart changed.
        """
        if product_id not in self._items:
            return False
        self._replace({pid: p for pid, p in self._items.items() if pid != product_id})
        logger.debug(f"Removed product {product_id!r} from cart")
        return True

    def clear(self) -> bool:
        if not self._items:
            return False
        self._replace({})
        return True

    # --- Observers ---

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Call ``listener`` with each new snapshot; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _replace(self, items: Dict[str, Product]) -> None:
        self._items = MappingProxyType(items)
        for listener in list(self._listeners):
            listener(self._items)
