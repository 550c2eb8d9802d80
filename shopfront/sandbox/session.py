"""Session state wrapper for the Streamlit sandbox.

Gives typed access to the catalog, the cart and the current page stored in
st.session_state. Streamlit reruns the script on every interaction, so the
Cart object living in session state is what carries the cart across reruns.
"""

from typing import Optional

import streamlit as st

from shopfront.shared.domain.cart import Cart
from shopfront.shared.domain.catalog import Catalog
from shopfront.shared.infrastructure.catalog_source import CatalogLoadState, LoadStatus


class Session:
    """Wrapper around st.session_state for type safety and centralized management."""

    @property
    def catalog_state(self) -> Optional[CatalogLoadState]:
        return st.session_state.get('catalog_state')

    @catalog_state.setter
    def catalog_state(self, value: Optional[CatalogLoadState]):
        st.session_state['catalog_state'] = value

    @property
    def catalog(self) -> Optional[Catalog]:
        """The loaded catalog, or None while loading / after a failure."""
        state = self.catalog_state
        if state is not None and state.status is LoadStatus.LOADED:
            return state.catalog
        return None

    @property
    def cart(self) -> Cart:
        return st.session_state['cart']

    @property
    def page(self) -> str:
        return st.session_state.get('page', 'shop')

    @page.setter
    def page(self, value: str):
        st.session_state['page'] = value

    def initialize(self):
        """Initialize session with default values."""
        if 'initialized' not in st.session_state:
            st.session_state['initialized'] = True
            st.session_state['catalog_state'] = None
            st.session_state['cart'] = Cart()
            st.session_state['page'] = 'shop'

    def clear_all(self):
        """Reset all session state."""
        for key in ('initialized', 'catalog_state', 'cart', 'page'):
            if key in st.session_state:
                del st.session_state[key]
