"""Tests for the Streamlit sandbox, driven through streamlit's AppTest."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "shopfront" / "sandbox" / "app.py")


@pytest.fixture
def app(clean_env):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_shop_page_adds_to_cart(app):
    app.button(key="shop_add_1").click().run()

    assert app.session_state["cart"].contains("1")
    assert app.session_state["cart"].count() == 1


def test_reset_session_starts_over(app):
    app.button(key="shop_add_1").click().run()
    app.button(key="nav_cart").click().run()
    assert app.session_state["page"] == "cart"

    app.button(key="reset_session").click().run()

    assert not app.exception
    assert app.session_state["cart"].count() == 0
    assert app.session_state["page"] == "shop"
