from .cart_controller import CartController
from .catalog_controller import CatalogController

__all__ = ["CartController", "CatalogController"]
