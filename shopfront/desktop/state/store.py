"""State container handed to every UI component.

Built once by the entry point and passed down explicitly; there is no
module-level instance.
"""

from __future__ import annotations

from typing import Optional

from shopfront.shared.core.event_bus import EventBus
from shopfront.shared.domain.cart import Cart
from shopfront.shared.domain.catalog import Catalog
from .app_state import AppState
from .cart_state import CartState
from .catalog_state import CatalogState


class Store:
    """Groups the shell, catalog and cart state of one session.

    Usage:
        store = Store(event_bus, price_threshold=5000)
        store.cart.add(product)
        store.catalog.reduced()
    """

    def __init__(
        self,
        event_bus: EventBus,
        price_threshold: int,
        catalog: Optional[Catalog] = None,
        cart: Optional[Cart] = None,
    ) -> None:
        self.bus = event_bus
        self.app = AppState(event_bus)
        self.catalog = CatalogState(price_threshold, catalog)
        self.cart = CartState(cart)
