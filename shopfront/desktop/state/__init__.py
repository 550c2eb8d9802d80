"""FletXr Reactive State Management for the desktop shell.

Architecture:
- AppState: shell state (navigation, status line, log panel)
- CatalogState: catalog load status, products, reduced list
- CartState: reactive mirror of the domain Cart
- Store: per-session container passed to controllers and layouts
"""

from .app_state import AppState
from .cart_state import CartState
from .catalog_state import CatalogState
from .store import Store

__all__ = ["AppState", "CartState", "CatalogState", "Store"]
