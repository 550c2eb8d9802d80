"""
Shared pytest fixtures for Shopfront tests.
"""

import pytest

from shopfront.shared.core.configuration import ENV_OVERRIDES
from shopfront.shared.domain.catalog import Catalog, Product


@pytest.fixture
def product_a():
    return Product(id="a", title="Alpha", price=30, image="img/a.png")


@pytest.fixture
def product_b():
    return Product(id="b", title="Bravo", price=60, image="img/b.png")


@pytest.fixture
def sample_catalog():
    return Catalog([
        Product(id="p1", title="Shorts", price=1200),
        Product(id="p2", title="Jeans", price=5400),
        Product(id="p3", title="Backpack", price=1400),
        Product(id="p4", title="Guitar", price=7900),
        Product(id="p5", title="Drum", price=5000),
        Product(id="p6", title="Sticker", price=0),
    ])


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the config layer reads."""
    for key in ENV_OVERRIDES:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
