"""In-process async event bus.

Cart commands, catalog loading and the shell talk through topics rather than
direct references. Each published event fans out to one task per handler, and
a failing handler is logged without affecting its siblings.
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]

logger = logging.getLogger(__name__)


class EventBus:
    """Topic -> handlers registry shared by the shell, controllers and state objects."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._in_flight: set[asyncio.Task] = set()
        # asyncio.Lock binds to a loop; the desktop app inits on a worker-thread loop
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    def _lock_for_loop(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Add ``handler`` to ``topic``; subscribing the same handler twice is a no-op."""
        async with self._lock_for_loop():
            handlers = self._handlers[topic]
            if handler not in handlers:
                handlers.append(handler)

    async def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        async with self._lock_for_loop():
            handlers = self._handlers.get(topic)
            if handlers and handler in handlers:
                handlers.remove(handler)

    def subscriber_count(self, topic: str) -> int:
        return len(self._handlers.get(topic, ()))

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Schedule every handler of ``topic``; does not wait for them to run."""
        async with self._lock_for_loop():
            targets = tuple(self._handlers.get(topic, ()))

        if not targets:
            logger.debug(f"Dropped '{topic}': nobody is subscribed")
            return

        logger.debug(f"'{topic}' -> {len(targets)} handler(s)")
        for handler in targets:
            task = asyncio.create_task(self._run_handler(topic, handler, payload))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)

    async def wait_until_idle(self, timeout: float = 10.0) -> bool:
        """Block until no handler task is in flight.

        Handlers that publish again extend the wait. Returns False if
        ``timeout`` seconds pass first.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while self._in_flight:
            remaining = deadline - loop.time()
            if remaining <= 0:
                logger.warning(f"Gave up waiting on {len(self._in_flight)} event handler(s)")
                return False
            await asyncio.wait(tuple(self._in_flight), timeout=remaining)
        return True

    async def _run_handler(self, topic: str, handler: EventHandler, payload: EventPayload) -> None:
        try:
            await handler(payload)
        except Exception:
            name = getattr(handler, "__qualname__", repr(handler))
            logger.exception(f"Handler {name} failed on '{topic}'")
