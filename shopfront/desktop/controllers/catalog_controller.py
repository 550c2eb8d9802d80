"""Controller for the shop and deals views."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import flet as ft

from shopfront.shared.domain.catalog import Product, display_price
from shopfront.shared.infrastructure.catalog_source import LoadStatus
from shopfront.desktop.ui.components.product_tile import build_product_tile
from shopfront.desktop.ui.theme import (
    BORDER_DIVIDER, CYAN_PRIMARY, RED_PRIMARY,
    TEXT_PLACEHOLDER, TEXT_STATUS, TEXT_TITLE,
)

if TYPE_CHECKING:
    from shopfront.desktop.state import Store
    from .cart_controller import CartController


class CatalogController:
    """Builds the product list views from CatalogState and CartState."""

    def __init__(self, store: Store, cart_controller: CartController, currency_symbol: str = "$"):
        self.store = store
        self.cart_controller = cart_controller
        self.currency_symbol = currency_symbol

    def visible_products(self, deals_only: bool) -> List[Product]:
        if deals_only:
            return self.store.catalog.reduced()
        return list(self.store.catalog.products.value)

    def build_view(self, deals_only: bool = False) -> ft.Control:
        catalog = self.store.catalog
        threshold = display_price(catalog.price_threshold, self.currency_symbol)
        if deals_only:
            title, subtitle = "Deals", f"Everything under {threshold}"
        else:
            title, subtitle = "Shop", "All products"

        header = [
            ft.Text(title, size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
            ft.Text(subtitle, size=13, color=TEXT_STATUS),
            ft.Divider(color=BORDER_DIVIDER, height=1),
        ]

        return ft.Container(
            expand=True,
            padding=ft.padding.only(left=20, right=20, top=16, bottom=20),
            content=ft.Column(header + [self._build_body(deals_only)], spacing=12, expand=True),
        )

    def _build_body(self, deals_only: bool) -> ft.Control:
        catalog = self.store.catalog
        status = catalog.status.value

        if status == LoadStatus.LOADING.value:
            return ft.Row(
                [
                    ft.ProgressRing(width=16, height=16, stroke_width=2, color=CYAN_PRIMARY),
                    ft.Text("Loading catalog...", color=TEXT_STATUS, size=13),
                ],
                spacing=8,
            )

        if status == LoadStatus.FAILED.value and not catalog.products.value:
            return ft.Text(f"Could not load catalog: {catalog.error.value}", color=RED_PRIMARY, size=14)

        products = self.visible_products(deals_only)
        if not products:
            message = "No products under the deal price" if deals_only else "The catalog is empty"
            return ft.Text(message, color=TEXT_PLACEHOLDER, size=15, italic=True)

        cart = self.store.cart
        deal_ids = {p.id for p in catalog.reduced()}
        tiles = [
            build_product_tile(
                product,
                in_cart=cart.contains(product.id),
                on_add=self.cart_controller.add,
                on_remove=self.cart_controller.remove,
                is_deal=product.id in deal_ids,
                currency_symbol=self.currency_symbol,
            )
            for product in products
        ]
        return ft.Column(tiles, spacing=8, scroll=ft.ScrollMode.AUTO, expand=True)
