"""Reactive cart state backed by the domain Cart."""

from __future__ import annotations

from typing import Dict, FrozenSet, Mapping, Optional

from fletx.core import RxDict

from shopfront.shared.domain.cart import Cart
from shopfront.shared.domain.catalog import Product


class CartState:
    """Exposes a Cart to Flet through an ``RxDict`` of id -> Product.

    The Cart is the source of truth. Its snapshots are copied into
    ``items`` on every effective change, so listeners on ``items`` fire for
    real additions and removals only.
    """

    def __init__(self, cart: Optional[Cart] = None) -> None:
        self._cart = cart if cart is not None else Cart()
        self.items: RxDict[str, Product] = RxDict(dict(self._cart.items))
        self._unsubscribe = self._cart.subscribe(self._on_cart_changed)

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def products(self) -> FrozenSet[Product]:
        return self._cart.products

    def add(self, product: Product) -> bool:
        return self._cart.add(product)

    def remove(self, product_id: str) -> bool:
        return self._cart.remove(product_id)

    def clear(self) -> bool:
        return self._cart.clear()

    def contains(self, product_id: str) -> bool:
        return self._cart.contains(product_id)

    def total(self) -> int:
        return self._cart.total()

    def count(self) -> int:
        return self._cart.count()

    def restore(self, saved: Cart) -> int:
        """Merge a saved cart (e.g. one read from disk) into the live cart.

        Products already in the live cart win; returns how many were added.
        """
        return sum(1 for product in saved if self._cart.add(product))

    def _on_cart_changed(self, items: Mapping[str, Product]) -> None:
        snapshot: Dict[str, Product] = dict(items)
        self.items.value = snapshot
