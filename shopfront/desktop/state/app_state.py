"""Application Shell State Management.

Reactive shell state (navigation, status line, log panel) built on FletXr
primitives. Bus events update the ``Rx*`` properties and the shell's
listeners redraw.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

from fletx.core import RxBool, RxList, RxStr

from shopfront.shared.core import events
from shopfront.shared.core.event_bus import EventBus, EventPayload

MAX_LOG_ENTRIES = 200


class AppState:
    """Reactive state for the application shell.

    Subscribes to shell topics on the EventBus and mirrors them into
    reactive properties that the Flet layout listens to.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self.bus = event_bus

        # Navigation
        self.nav_items: RxList[Dict[str, str]] = RxList([
            {"id": "shop", "label": "Shop", "icon": "storefront"},
            {"id": "deals", "label": "Deals", "icon": "local_offer"},
            {"id": "cart", "label": "Cart", "icon": "shopping_cart"},
        ])
        self.nav_selected: RxStr = RxStr("shop")

        # Status & readiness
        self.is_ready: RxBool = RxBool(False)
        self.status_text: RxStr = RxStr("Starting...")

        # Log entries (each is a dict: {message, level, ts})
        self.logs: RxList[Dict[str, Any]] = RxList([])

        self._started = False

    async def initialize(self) -> None:
        """Bind to EventBus topics. Safe to call more than once."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_STATUS_TEXT, self._handle_status_text)
        await self.bus.subscribe(events.TOPIC_NAV_SELECT, self._handle_nav_select)
        await self.bus.subscribe(events.TOPIC_LOGS_EVENT, self._handle_log_event)

        self._started = True
        self.is_ready.value = True

    # --- Public Actions ---

    def set_nav(self, route_id: str) -> None:
        self.nav_selected.value = route_id

    async def publish(self, topic: str, payload: EventPayload) -> None:
        await self.bus.publish(topic, payload)

    async def push_status(self, text: str) -> None:
        await self.publish(events.TOPIC_STATUS_TEXT, events.create_status_event(text))

    async def push_log(self, message: str, level: events.LogLevel = "info") -> None:
        await self.publish(events.TOPIC_LOGS_EVENT, events.create_log_event(message, level))

    def add_log(self, message: str, level: str = "info", ts: Optional[float] = None) -> None:
        """Append a log entry directly, keeping the newest MAX_LOG_ENTRIES."""
        entry = {"message": message, "level": level, "ts": ts if ts is not None else time.time()}
        entries = list(self.logs.value)
        entries.append(entry)
        self.logs.value = entries[-MAX_LOG_ENTRIES:]

    # --- Event Handlers ---

    async def _handle_status_text(self, payload: EventPayload) -> None:
        text = payload.get("text")
        if text:
            self.status_text.value = str(text)

    async def _handle_nav_select(self, payload: EventPayload) -> None:
        selection = payload.get("id")
        if selection:
            self.nav_selected.value = str(selection)

    async def _handle_log_event(self, payload: EventPayload) -> None:
        message = payload.get("message")
        if message:
            self.add_log(str(message), str(payload.get("level", "info")), payload.get("ts"))
