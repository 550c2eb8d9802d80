"""Controller for cart commands and the cart view."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

import flet as ft

from shopfront.shared.core import events
from shopfront.shared.domain.catalog import Product, display_price
from shopfront.desktop.ui.components.product_tile import build_product_tile
from shopfront.desktop.ui.theme import TEXT_PLACEHOLDER, TEXT_PRICE, TEXT_TITLE, BORDER_DIVIDER

if TYPE_CHECKING:
    from shopfront.desktop.state import Store

logger = logging.getLogger(__name__)


class CartController:
    """Dispatches add/remove into the cart and announces changes on the bus."""

    def __init__(self, store: Store, currency_symbol: str = "$"):
        self.store = store
        self.currency_symbol = currency_symbol

    async def add(self, product: Product) -> bool:
        if not self.store.cart.add(product):
            return False
        await self._announce(events.TOPIC_CART_ITEM_ADDED, product, f"Added {product.title} to cart")
        return True

    async def remove(self, product: Product) -> bool:
        if not self.store.cart.remove(product.id):
            return False
        await self._announce(events.TOPIC_CART_ITEM_REMOVED, product, f"Removed {product.title} from cart")
        return True

    async def clear(self) -> bool:
        if not self.store.cart.clear():
            return False
        await self.store.bus.publish(events.TOPIC_CART_CLEARED, {})
        await self.store.app.push_log("Cart cleared", "info")
        return True

    async def _announce(self, topic: str, product: Product, message: str) -> None:
        cart = self.store.cart
        logger.info(f"{message} (count={cart.count()}, total={cart.total()})")
        await self.store.bus.publish(topic, events.create_cart_item_event(product, cart.count(), cart.total()))
        await self.store.app.push_log(message, "success" if topic == events.TOPIC_CART_ITEM_ADDED else "info")

    def summary_text(self) -> str:
        cart = self.store.cart
        noun = "item" if cart.count() == 1 else "items"
        return f"{cart.count()} {noun} · {display_price(cart.total(), self.currency_symbol)}"

    def build_view(self) -> ft.Control:
        cart = self.store.cart
        products: List[Product] = sorted(cart.products, key=lambda p: p.title.lower())

        async def _clear(e: ft.ControlEvent) -> None:
            await self.clear()

        if products:
            body: List[ft.Control] = [
                build_product_tile(
                    product,
                    in_cart=True,
                    on_add=self.add,
                    on_remove=self.remove,
                    currency_symbol=self.currency_symbol,
                )
                for product in products
            ]
        else:
            body = [ft.Text("Your cart is empty", color=TEXT_PLACEHOLDER, size=15, italic=True)]

        footer = ft.Row(
            [
                ft.Text("Total", size=18, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                ft.Text(display_price(cart.total(), self.currency_symbol), size=18,
                        weight=ft.FontWeight.W_700, color=TEXT_PRICE),
                ft.Container(expand=True),
                ft.TextButton(
                    "Clear cart",
                    icon=ft.Icons.DELETE_SWEEP,
                    on_click=_clear,
                    disabled=not products,
                ),
            ],
            spacing=12,
        )

        return ft.Container(
            expand=True,
            padding=ft.padding.only(left=20, right=20, top=16, bottom=20),
            content=ft.Column(
                [
                    ft.Text("Your Cart", size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                    ft.Divider(color=BORDER_DIVIDER, height=1),
                    ft.Column(body, spacing=8, scroll=ft.ScrollMode.AUTO, expand=True),
                    ft.Divider(color=BORDER_DIVIDER, height=1),
                    footer,
                ],
                spacing=16,
                expand=True,
            ),
        )
