from .cart import Cart, CartListener, CartLoadError

__all__ = ["Cart", "CartListener", "CartLoadError"]
