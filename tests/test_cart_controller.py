"""Tests for cart commands dispatched from the desktop UI."""

import pytest

from shopfront.desktop.controllers import CartController, CatalogController
from shopfront.desktop.state import Store
from shopfront.shared.core import events
from shopfront.shared.core.event_bus import EventBus


@pytest.fixture
def store(sample_catalog):
    return Store(EventBus(), price_threshold=5000, catalog=sample_catalog)


async def _record(bus, topic):
    received = []

    async def handler(payload):
        received.append(payload)

    await bus.subscribe(topic, handler)
    return received


@pytest.mark.asyncio
async def test_add_publishes_item_added(store, product_a):
    controller = CartController(store)
    added = await _record(store.bus, events.TOPIC_CART_ITEM_ADDED)

    assert await controller.add(product_a) is True
    assert await controller.add(product_a) is False
    assert await store.bus.wait_until_idle()

    assert added == [{"product_id": "a", "title": "Alpha", "price": 30, "count": 1, "total": 30}]


@pytest.mark.asyncio
async def test_remove_publishes_item_removed(store, product_a, product_b):
    controller = CartController(store)
    removed = await _record(store.bus, events.TOPIC_CART_ITEM_REMOVED)
    await controller.add(product_a)
    await controller.add(product_b)

    assert await controller.remove(product_a) is True
    assert await controller.remove(product_a) is False
    assert await store.bus.wait_until_idle()

    assert [(p["product_id"], p["count"], p["total"]) for p in removed] == [("a", 1, 60)]


@pytest.mark.asyncio
async def test_clear_publishes_once(store, product_a):
    controller = CartController(store)
    cleared = await _record(store.bus, events.TOPIC_CART_CLEARED)
    await controller.add(product_a)

    assert await controller.clear() is True
    assert await controller.clear() is False
    assert await store.bus.wait_until_idle()

    assert cleared == [{}]
    assert store.cart.count() == 0


@pytest.mark.asyncio
async def test_summary_text(store, product_a, product_b):
    controller = CartController(store)
    assert controller.summary_text() == "0 items · $0.00"

    await controller.add(product_a)
    assert controller.summary_text() == "1 item · $0.30"

    await controller.add(product_b)
    assert controller.summary_text() == "2 items · $0.90"


def test_catalog_controller_visible_products(store):
    controller = CatalogController(store, CartController(store))

    assert [p.id for p in controller.visible_products(deals_only=False)] == ["p1", "p2", "p3", "p4", "p5", "p6"]
    assert [p.id for p in controller.visible_products(deals_only=True)] == ["p1", "p3", "p6"]
