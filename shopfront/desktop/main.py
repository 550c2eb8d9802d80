"""Shopfront - Flet desktop entry point.

Run with: python -m shopfront.desktop.main
"""

from __future__ import annotations

import asyncio
import logging
import logging.handlers
import threading
from pathlib import Path
from typing import Optional

import flet as ft
from dotenv import load_dotenv

from shopfront.desktop.state import Store
from shopfront.desktop.ui.layouts.shell import build_shell
from shopfront.shared.core import events
from shopfront.shared.core.configuration import LoggingConfig, SystemConfig, ValidationLevel, get_config
from shopfront.shared.core.event_bus import EventBus
from shopfront.shared.core.service_registry import register_cleanup_handler
from shopfront.shared.domain.cart import CartLoadError
from shopfront.shared.infrastructure.catalog_source import CatalogSource, LoadStatus
from shopfront.shared.infrastructure.persistence import CartRepository

logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig) -> Path:
    """Install a rotating file handler plus a WARNING+ console handler.

    Returns the log file path.
    """
    logs_dir = Path(config.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "shopfront.log"

    file_log_level = logging.getLevelName(config.level.upper())
    if not isinstance(file_log_level, int):
        file_log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    # Quiet chatty third-party loggers
    for name in ("httpx", "httpcore", "flet", "flet_controls", "flet_transport"):
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)

    return log_file_path


async def init_services(store: Store, source: CatalogSource, repository: Optional[CartRepository]) -> None:
    """Wire bus subscriptions, restore the saved cart and load the catalog."""
    await store.app.initialize()
    logger.info("AppState initialized")

    if repository is not None:
        try:
            restored = store.cart.restore(repository.load())
            if restored:
                await store.app.push_log(f"Restored {restored} item(s) from last session")
        except CartLoadError as e:
            logger.warning(f"Could not restore saved cart: {e}")
            await store.app.push_log("Saved cart was unreadable; starting empty", "warning")

    await store.app.push_status(f"Loading catalog from {source.label}...")
    state = await source.load()
    store.catalog.apply(state)

    if state.status is LoadStatus.LOADED:
        await store.bus.publish(
            events.TOPIC_CATALOG_LOADED,
            events.create_catalog_loaded_event(len(state.catalog), source.label),
        )
        await store.app.push_status(f"{len(state.catalog)} products")
        await store.app.push_log(f"Catalog loaded ({len(state.catalog)} products)", "success")
    else:
        await store.bus.publish(
            events.TOPIC_CATALOG_FAILED,
            events.create_catalog_failed_event(state.error or "", source.label),
        )
        await store.app.push_status("Catalog unavailable")
        await store.app.push_log(f"Catalog load failed: {state.error}", "error")

    await store.bus.wait_until_idle()


def _run_async_init(store: Store, source: CatalogSource, repository: Optional[CartRepository]) -> None:
    """Run async initialization on its own event loop (background thread)."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        loop.run_until_complete(init_services(store, source, repository))
        logger.info("Services initialization completed")
    except Exception:
        logger.exception("Error in async initialization")
    finally:
        pending = asyncio.all_tasks(loop)
        for task in pending:
            task.cancel()
        if pending:
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
        loop.close()


def create_app(config: SystemConfig):
    """Build the Flet target function for ``config``."""

    def main(page: ft.Page) -> None:
        logger.info("Initializing Shopfront...")
        page.title = "Shopfront"

        event_bus = EventBus()
        store = Store(event_bus, price_threshold=config.catalog.price_threshold)

        repository: Optional[CartRepository] = None
        if config.cart.persist:
            repository = CartRepository(config.cart.path)
            register_cleanup_handler(lambda: repository.save(store.cart.cart))

        source = CatalogSource(config.catalog.source, timeout=config.catalog.request_timeout)

        init_thread = threading.Thread(
            target=_run_async_init,
            args=(store, source, repository),
            daemon=True,
            name="ServiceInitThread",
        )
        init_thread.start()

        page.views.append(build_shell(page, store, config.ui.currency_symbol, config.ui.theme_mode))
        page.update()
        logger.info("Application initialized successfully")

    return main


def run() -> None:
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    config = get_config(ValidationLevel.LENIENT)
    log_file_path = configure_logging(config.logging)
    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")

    target = create_app(config)
    if config.ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {config.ui.flet_port}")
        ft.app(target=target, view=ft.AppView.WEB_BROWSER, port=config.ui.flet_port, host="127.0.0.1")
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.app(target=target, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
