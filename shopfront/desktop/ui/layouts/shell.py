from __future__ import annotations

import datetime
from typing import List

import flet as ft

from shopfront.desktop.state import Store
from shopfront.desktop.controllers import CartController, CatalogController
from shopfront.desktop.ui.theme import (
    CYAN_PRIMARY,
    BG_NAV, BG_PAGE, BG_PANEL,
    BORDER_DIVIDER,
    TEXT_BRIGHT, TEXT_MUTED, TEXT_STATUS,
    LOG_PANEL_TITLE, get_log_color,
)


def apply_shell_theme(page: ft.Page, theme_mode: str = "dark") -> None:
    page.theme = ft.Theme(color_scheme_seed=CYAN_PRIMARY, use_material3=True)
    page.theme_mode = ft.ThemeMode.LIGHT if theme_mode == "light" else ft.ThemeMode.DARK
    page.bgcolor = BG_PAGE
    page.padding = 0


def _nav_destinations(items: List[dict], cart_count: int) -> List[ft.NavigationRailDestination]:
    destinations: List[ft.NavigationRailDestination] = []
    for item in items:
        icon_name = str(item.get("icon", "storefront")).upper()
        icon = getattr(ft.Icons, icon_name, ft.Icons.STOREFRONT)
        label = item.get("label", "")
        if item.get("id") == "cart" and cart_count:
            label = f"{label} ({cart_count})"
        destinations.append(ft.NavigationRailDestination(icon=icon, label=label))
    return destinations


def build_shell(page: ft.Page, store: Store, currency_symbol: str = "$", theme_mode: str = "dark") -> ft.View:
    apply_shell_theme(page, theme_mode)

    cart_controller = CartController(store, currency_symbol)
    catalog_controller = CatalogController(store, cart_controller, currency_symbol)

    def _safe_update() -> None:
        try:
            page.update()
        except RuntimeError:
            # Session already torn down
            pass

    # --- Content ---
    content_container = ft.Container(expand=True)

    def _render_content() -> None:
        nav_id = store.app.nav_selected.value
        if nav_id == "cart":
            content_container.content = cart_controller.build_view()
        else:
            content_container.content = catalog_controller.build_view(deals_only=(nav_id == "deals"))

    # --- Navigation ---
    nav_rail = ft.NavigationRail(label_type=ft.NavigationRailLabelType.ALL)
    nav_rail.bgcolor = BG_NAV
    nav_rail.indicator_color = CYAN_PRIMARY
    nav_rail.selected_label_text_style = ft.TextStyle(color=TEXT_BRIGHT)
    nav_rail.unselected_label_text_style = ft.TextStyle(color=TEXT_MUTED)
    nav_rail.min_width = 80

    def _sync_nav(e=None) -> None:
        items = store.app.nav_items.value
        nav_rail.destinations = _nav_destinations(items, store.cart.count())
        ids = [item.get("id") for item in items]
        if store.app.nav_selected.value in ids:
            nav_rail.selected_index = ids.index(store.app.nav_selected.value)
        _render_content()
        _safe_update()

    def _on_nav_change(e: ft.ControlEvent) -> None:
        idx = e.control.selected_index
        items = store.app.nav_items.value
        if idx is not None and 0 <= idx < len(items):
            store.app.set_nav(items[idx].get("id", "shop"))

    nav_rail.on_change = _on_nav_change  # type: ignore[assignment]

    # --- Status bar ---
    status_text = ft.Text(store.app.status_text.value, color=TEXT_STATUS, size=12)
    cart_summary = ft.Text(cart_controller.summary_text(), color=TEXT_STATUS, size=12)

    def _sync_status(e=None) -> None:
        status_text.value = store.app.status_text.value
        _safe_update()

    # --- Log panel ---
    log_list_column = ft.Column(spacing=4, scroll=ft.ScrollMode.AUTO)

    def _sync_logs(e=None) -> None:
        entries = sorted(store.app.logs.value, key=lambda x: x.get("ts", 0), reverse=True)[:100]
        controls = []
        for entry in entries:
            level = entry.get("level", "info")
            ts = entry.get("ts", 0)
            time_str = datetime.datetime.fromtimestamp(ts).strftime("%H:%M:%S") if ts else ""
            color = get_log_color(level)
            controls.append(
                ft.Row([
                    ft.Text(level.upper(), size=11, color=color, width=60),
                    ft.Text(time_str, size=11, color=LOG_PANEL_TITLE, width=60),
                    ft.Text(entry.get("message", ""), size=12, color=color, expand=True),
                ], spacing=8)
            )
        log_list_column.controls = controls
        _safe_update()

    log_panel = ft.Container(
        width=320,
        bgcolor=BG_PANEL,
        border=ft.border.all(1, BORDER_DIVIDER),
        border_radius=8,
        padding=12,
        content=ft.Column([
            ft.Text("Activity", size=16, weight=ft.FontWeight.W_700, color=LOG_PANEL_TITLE),
            ft.Divider(height=1, color=BORDER_DIVIDER),
            ft.Container(content=log_list_column, expand=True),
        ], spacing=8),
    )

    # --- Reactive bindings ---
    def _on_cart_change(e=None) -> None:
        cart_summary.value = cart_controller.summary_text()
        _sync_nav()

    store.app.nav_items.listen(_sync_nav)
    store.app.nav_selected.listen(_sync_nav)
    store.app.status_text.listen(_sync_status)
    store.app.logs.listen(_sync_logs)
    store.catalog.status.listen(_sync_nav)
    store.catalog.products.listen(_sync_nav)
    store.cart.items.listen(_on_cart_change)

    chrome = ft.Row(
        [
            nav_rail,
            ft.VerticalDivider(width=1, color=BORDER_DIVIDER),
            ft.Column(
                [
                    ft.Row(
                        [status_text, ft.Container(expand=True), cart_summary],
                        height=32,
                    ),
                    ft.Row([content_container, log_panel], expand=True, spacing=8),
                ],
                expand=True,
                spacing=0,
            ),
        ],
        expand=True,
    )

    _sync_nav()
    _sync_status()
    _sync_logs()

    return ft.View(
        route="/",
        controls=[ft.Container(content=chrome, expand=True, padding=8)],
        bgcolor=BG_PAGE,
        padding=0,
    )
