"""Tests for the FletXr-backed desktop state objects."""

import pytest

from shopfront.desktop.state import AppState, CartState, CatalogState, Store
from shopfront.shared.core import events
from shopfront.shared.core.event_bus import EventBus
from shopfront.shared.domain.cart import Cart
from shopfront.shared.infrastructure.catalog_source import CatalogLoadState, LoadStatus


# --- CartState ---

def test_cart_state_mirrors_cart(product_a, product_b):
    state = CartState()

    state.add(product_a)
    state.add(product_b)

    assert state.count() == 2
    assert state.total() == 90
    assert dict(state.items.value) == {"a": product_a, "b": product_b}


def test_cart_state_remove_and_contains(product_a, product_b):
    state = CartState(Cart([product_a, product_b]))

    assert dict(state.items.value) == {"a": product_a, "b": product_b}
    assert state.remove("a") is True
    assert state.remove("a") is False
    assert state.contains("a") is False
    assert dict(state.items.value) == {"b": product_b}


def test_cart_state_duplicate_add_is_ignored(product_a):
    state = CartState()

    assert state.add(product_a) is True
    assert state.add(product_a) is False
    assert state.count() == 1


def test_cart_state_follows_direct_cart_mutation(product_a):
    cart = Cart()
    state = CartState(cart)

    cart.add(product_a)

    assert dict(state.items.value) == {"a": product_a}


def test_cart_state_restore_merges_into_live_cart(product_a, product_b):
    state = CartState(Cart([product_a]))

    assert state.restore(Cart([product_a, product_b])) == 1
    assert dict(state.items.value) == {"a": product_a, "b": product_b}
    assert state.products == {product_a, product_b}


def test_cart_state_clear(product_a):
    state = CartState(Cart([product_a]))

    assert state.clear() is True
    assert dict(state.items.value) == {}
    assert state.total() == 0


# --- CatalogState ---

def test_catalog_state_starts_loading():
    state = CatalogState(price_threshold=5000)

    assert state.status.value == LoadStatus.LOADING.value
    assert list(state.products.value) == []
    assert state.reduced() == []
    assert state.find("p1") is None


def test_catalog_state_loaded(sample_catalog):
    state = CatalogState(price_threshold=5000)

    state.apply(CatalogLoadState.loaded(sample_catalog))

    assert state.is_loaded
    assert [p.id for p in state.products.value] == list(sample_catalog.ids)
    assert [p.id for p in state.reduced()] == ["p1", "p3", "p6"]
    assert state.find("p4").title == "Guitar"
    assert state.catalog is sample_catalog


def test_catalog_state_failed_keeps_previous_products(sample_catalog):
    state = CatalogState(price_threshold=5000, catalog=sample_catalog)

    state.apply(CatalogLoadState.failed("timeout"))

    assert state.status.value == LoadStatus.FAILED.value
    assert state.error.value == "timeout"
    assert len(state.products.value) == len(sample_catalog)


def test_catalog_state_threshold_is_used(sample_catalog):
    state = CatalogState(price_threshold=1300, catalog=sample_catalog)

    assert [p.id for p in state.reduced()] == ["p1", "p6"]


# --- AppState ---

@pytest.mark.asyncio
async def test_app_state_reacts_to_bus_events():
    bus = EventBus()
    app = AppState(bus)
    await app.initialize()
    await app.initialize()

    await app.push_status("3 products")
    await bus.publish(events.TOPIC_NAV_SELECT, events.create_nav_select_event("cart"))
    await app.push_log("Added Alpha to cart", "success")
    assert await bus.wait_until_idle()

    assert app.is_ready.value is True
    assert app.status_text.value == "3 products"
    assert app.nav_selected.value == "cart"
    assert [entry["message"] for entry in app.logs.value] == ["Added Alpha to cart"]
    assert app.logs.value[0]["level"] == "success"
    assert bus.subscriber_count(events.TOPIC_LOGS_EVENT) == 1


def test_app_state_log_buffer_is_bounded():
    app = AppState(EventBus())

    for i in range(250):
        app.add_log(f"entry {i}", ts=float(i))

    assert len(app.logs.value) == 200
    assert app.logs.value[-1]["message"] == "entry 249"


def test_store_wires_states(sample_catalog, product_a):
    store = Store(EventBus(), price_threshold=5000, catalog=sample_catalog, cart=Cart([product_a]))

    assert store.catalog.is_loaded
    assert store.cart.count() == 1
    assert store.app.nav_selected.value == "shop"
