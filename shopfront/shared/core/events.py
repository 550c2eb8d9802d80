"""Canonical event topics and payload builders for Shopfront."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from .event_bus import EventPayload

if TYPE_CHECKING:
    from shopfront.shared.domain.catalog import Product

# Shell topics
TOPIC_LOGS_EVENT = "logs.event"
TOPIC_STATUS_TEXT = "status.text"
TOPIC_NAV_SELECT = "nav.select"

# Cart topics
TOPIC_CART_ITEM_ADDED = "cart.item_added"
TOPIC_CART_ITEM_REMOVED = "cart.item_removed"
TOPIC_CART_CLEARED = "cart.cleared"

# Catalog lifecycle
TOPIC_CATALOG_LOADED = "catalog.loaded"
TOPIC_CATALOG_FAILED = "catalog.failed"

LogLevel = Literal["debug", "info", "success", "warning", "error"]


def create_log_event(message: str, level: LogLevel = "info") -> EventPayload:
    """Create a log panel entry event."""
    return {
        "message": message,
        "level": level,
    }


def create_status_event(text: str) -> EventPayload:
    return {"text": text}


def create_nav_select_event(route_id: str) -> EventPayload:
    return {"id": route_id}


def create_cart_item_event(product: "Product", count: int, total: int) -> EventPayload:
    """Create a cart item added/removed event.

    Args:
        product: The product that entered or left the cart
        count: Cart member count after the change
        total: Cart total after the change, in the smallest currency unit
    """
    return {
        "product_id": product.id,
        "title": product.title,
        "price": product.price,
        "count": count,
        "total": total,
    }


def create_catalog_loaded_event(product_count: int, source: str) -> EventPayload:
    return {
        "product_count": product_count,
        "source": source,
    }


def create_catalog_failed_event(error: str, source: str) -> EventPayload:
    return {
        "error": error,
        "source": source,
    }
