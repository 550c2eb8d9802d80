"""Streamlit entry point for the Shopfront sandbox.

Run with: streamlit run shopfront/sandbox/app.py

A browser rendition of the desktop shop:
- Shop: the full catalog
- Deals: products under the configured price threshold
- Cart: cart members, count and total
"""

import asyncio
import logging
from typing import List

import streamlit as st

from shopfront.sandbox.session import Session
from shopfront.shared.core.configuration import SystemConfig, ValidationLevel, get_config
from shopfront.shared.domain.catalog import Product, display_price, filter_below
from shopfront.shared.infrastructure.catalog_source import CatalogSource, LoadStatus

logger = logging.getLogger(__name__)

PAGES = {
    "🛍️ Shop": "shop",
    "🏷️ Deals": "deals",
    "🛒 Cart": "cart",
}


def load_catalog(session: Session, config: SystemConfig) -> None:
    """Fetch the catalog once per session."""
    if session.catalog_state is not None and session.catalog_state.status is LoadStatus.LOADED:
        return
    source = CatalogSource(config.catalog.source, timeout=config.catalog.request_timeout)
    with st.spinner(f"Loading catalog from {source.label}..."):
        session.catalog_state = asyncio.run(source.load())


def render_product_rows(session: Session, products: List[Product], currency: str, key_prefix: str):
    cart = session.cart
    for product in products:
        col1, col2, col3 = st.columns([0.6, 0.2, 0.2])
        with col1:
            st.markdown(f"**{product.title}**")
        with col2:
            st.markdown(display_price(product.price, currency))
        with col3:
            if cart.contains(product.id):
                if st.button("Remove", key=f"{key_prefix}_remove_{product.id}", use_container_width=True):
                    cart.remove(product.id)
                    st.rerun()
            else:
                if st.button("Add", key=f"{key_prefix}_add_{product.id}", use_container_width=True):
                    cart.add(product)
                    st.rerun()


def render_shop(session: Session, config: SystemConfig):
    st.header("Shop")
    render_product_rows(session, list(session.catalog), config.ui.currency_symbol, "shop")


def render_deals(session: Session, config: SystemConfig):
    threshold = config.catalog.price_threshold
    currency = config.ui.currency_symbol
    st.header("Deals")
    st.caption(f"Everything under {display_price(threshold, currency)}")
    reduced = filter_below(session.catalog, threshold)
    if not reduced:
        st.info("No products under the deal price.")
        return
    render_product_rows(session, reduced, currency, "deals")


def render_cart(session: Session, config: SystemConfig):
    currency = config.ui.currency_symbol
    cart = session.cart
    st.header("Your Cart")
    if not cart.count():
        st.info("Your cart is empty.")
        return

    render_product_rows(session, sorted(cart, key=lambda p: p.title.lower()), currency, "cart")
    st.divider()
    col1, col2 = st.columns(2)
    col1.metric("Items", cart.count())
    col2.metric("Total", display_price(cart.total(), currency))
    if st.button("Clear cart"):
        cart.clear()
        st.rerun()


def main():
    st.set_page_config(page_title="Shopfront - Sandbox", page_icon="🛍️", layout="wide")

    session = Session()
    session.initialize()
    config = get_config(ValidationLevel.LENIENT)

    load_catalog(session, config)
    state = session.catalog_state
    if state is None or state.status is LoadStatus.FAILED:
        st.error(f"Could not load catalog: {state.error if state else 'unknown error'}")
        if st.button("🔄 Retry"):
            session.catalog_state = None
            st.rerun()
        return

    with st.sidebar:
        st.title("🛍️ Shopfront")
        st.markdown("---")
        cart = session.cart
        st.markdown(f"**{cart.count()}** item(s) · **{display_price(cart.total(), config.ui.currency_symbol)}**")
        st.markdown("---")
        for label, page_id in PAGES.items():
            if st.button(label, key=f"nav_{page_id}"):
                session.page = page_id
        st.markdown("---")
        if st.button("🔄 Reset session", key="reset_session"):
            session.clear_all()
            st.rerun()

    page = session.page
    if page == "cart":
        render_cart(session, config)
    elif page == "deals":
        render_deals(session, config)
    else:
        render_shop(session, config)


if __name__ == "__main__":
    main()
