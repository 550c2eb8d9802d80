"""Tests for the Cart store."""

import pytest

from shopfront.shared.domain.cart import Cart
from shopfront.shared.domain.catalog import Product


def test_empty_cart():
    cart = Cart()

    assert cart.count() == 0
    assert cart.total() == 0
    assert cart.products == frozenset()
    assert not cart.contains("a")


def test_add_two_products(product_a, product_b):
    cart = Cart()
    cart.add(product_a)
    cart.add(product_b)

    assert cart.count() == 2
    assert cart.total() == 90
    assert cart.products == {product_a, product_b}


def test_remove_product(product_a, product_b):
    cart = Cart([product_a, product_b])

    cart.remove("a")

    assert cart.count() == 1
    assert cart.total() == 60
    assert cart.contains("a") is False
    assert cart.contains("b") is True


def test_adding_twice_keeps_one(product_a):
    cart = Cart()

    assert cart.add(product_a) is True
    assert cart.add(product_a) is False
    assert cart.count() == 1
    assert cart.total() == 30


def test_uniqueness_is_by_id_not_value(product_a):
    cart = Cart([product_a])
    same_id = Product(id="a", title="Other", price=999)

    assert cart.add(same_id) is False
    assert cart.items["a"] is product_a
    assert cart.total() == 30


def test_removing_absent_id_leaves_cart_unchanged(product_a):
    cart = Cart([product_a])
    before = cart.items

    assert cart.remove("missing") is False
    assert cart.items is before
    assert cart.count() == 1


def test_ids_stay_unique_over_any_operation_sequence():
    products = [Product(id=str(i % 4), title=f"P{i}", price=i) for i in range(12)]
    cart = Cart()
    for step, product in enumerate(products):
        cart.add(product)
        if step % 3 == 2:
            cart.remove(str(step % 4))
        ids = [p.id for p in cart]
        assert len(ids) == len(set(ids))
        assert cart.total() == sum(p.price for p in cart.products)
        assert cart.count() == len(cart.products)


def test_snapshots_do_not_change_after_mutation(product_a, product_b):
    cart = Cart([product_a])
    snapshot = cart.items

    cart.add(product_b)
    cart.remove("a")

    assert dict(snapshot) == {"a": product_a}
    assert dict(cart.items) == {"b": product_b}


def test_items_snapshot_is_read_only(product_a):
    cart = Cart([product_a])

    with pytest.raises(TypeError):
        cart.items["x"] = product_a


def test_dunder_protocols(product_a, product_b):
    cart = Cart([product_a, product_b])

    assert "a" in cart
    assert "z" not in cart
    assert len(cart) == 2
    assert set(cart) == {product_a, product_b}


def test_clear(product_a, product_b):
    cart = Cart([product_a, product_b])

    assert cart.clear() is True
    assert cart.count() == 0
    assert cart.clear() is False


def test_listeners_receive_snapshot_on_effective_changes(product_a, product_b):
    cart = Cart()
    seen = []
    cart.subscribe(lambda items: seen.append(sorted(items)))

    cart.add(product_a)
    cart.add(product_a)
    cart.add(product_b)
    cart.remove("missing")
    cart.remove("a")
    cart.clear()
    cart.clear()

    assert seen == [["a"], ["a", "b"], ["b"], []]


def test_unsubscribe_stops_notifications(product_a, product_b):
    cart = Cart()
    seen = []
    unsubscribe = cart.subscribe(lambda items: seen.append(len(items)))

    cart.add(product_a)
    unsubscribe()
    cart.add(product_b)
    unsubscribe()

    assert seen == [1]


def test_constructor_deduplicates(product_a):
    cart = Cart([product_a, product_a])

    assert cart.count() == 1
