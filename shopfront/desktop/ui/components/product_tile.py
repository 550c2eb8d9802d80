"""Product tile used by the shop, deals and cart views."""

from __future__ import annotations

from typing import Awaitable, Callable

import flet as ft

from shopfront.shared.domain.catalog import Product, display_price
from shopfront.desktop.ui.theme import (
    BG_CARD, BG_CARD_SELECTED, BORDER_LIGHT,
    BUTTON_ADD, BUTTON_REMOVE, DEAL_BADGE,
    TEXT_PRICE, TEXT_PRODUCT,
)

ProductAction = Callable[[Product], Awaitable[None]]


def build_product_tile(
    product: Product,
    in_cart: bool,
    on_add: ProductAction,
    on_remove: ProductAction,
    is_deal: bool = False,
    currency_symbol: str = "$",
) -> ft.Container:
    """Render one product with an add or remove button depending on ``in_cart``."""

    async def _add(e: ft.ControlEvent) -> None:
        await on_add(product)

    async def _remove(e: ft.ControlEvent) -> None:
        await on_remove(product)

    if in_cart:
        action = ft.IconButton(
            ft.Icons.REMOVE_SHOPPING_CART,
            icon_color=BUTTON_REMOVE,
            tooltip="Remove from cart",
            on_click=_remove,
        )
    else:
        action = ft.IconButton(
            ft.Icons.ADD_SHOPPING_CART,
            icon_color=BUTTON_ADD,
            tooltip="Add to cart",
            on_click=_add,
        )

    title_row = [ft.Text(product.title, size=15, weight=ft.FontWeight.W_600, color=TEXT_PRODUCT)]
    if is_deal:
        title_row.append(ft.Icon(ft.Icons.LOCAL_OFFER, size=14, color=DEAL_BADGE))

    return ft.Container(
        bgcolor=BG_CARD_SELECTED if in_cart else BG_CARD,
        border=ft.border.all(1, BORDER_LIGHT),
        border_radius=8,
        padding=12,
        content=ft.Row(
            [
                ft.Image(src=product.image, width=56, height=56),
                ft.Column(
                    [
                        ft.Row(title_row, spacing=6),
                        ft.Text(display_price(product.price, currency_symbol), size=13, color=TEXT_PRICE),
                    ],
                    spacing=4,
                    expand=True,
                ),
                action,
            ],
            spacing=12,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )
