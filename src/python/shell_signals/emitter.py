# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""In-process named event emitter.

Example:
    window = Emitter("window")
    handle = window.register("focus", lambda w: print("focused", w))
    window.emit("focus", window)  # Prints: "focused <Emitter 'window': 1 handler(s)>"
    window.release(handle)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)


class Emitter:
    """An event source that dispatches named events to registered handlers.

    Handles are increasing integers and are never reused. Dispatch works on a
    snapshot of the handlers, so handlers may register or release others
    while an event is being emitted.
    """

    __slots__ = ("_handlers", "_lock", "_name", "_next_id", "__weakref__")

    def __init__(self, name: str = "") -> None:
        self._handlers: dict[int, tuple[str, Callable[..., Any]]] = {}
        self._lock = Lock()
        self._name = name
        self._next_id = 0

    def register(self, event_name: str, handler: Callable[..., Any]) -> int:
        """Register a handler for an event.

        Returns:
            Handle to pass to release().
        """
        with self._lock:
            handle = self._next_id
            self._next_id += 1
            self._handlers[handle] = (event_name, handler)
        return handle

    def release(self, handle: int) -> None:
        with self._lock:
            self._handlers.pop(handle, None)

    def emit(self, event_name: str, *args: Any, **kwargs: Any) -> int:
        """Invoke every handler registered for an event. Returns count invoked."""
        with self._lock:
            callbacks = [(h, cb) for h, (name, cb) in self._handlers.items() if name == event_name]

        invoked = 0
        for handle, callback in callbacks:
            # Released by an earlier handler of this same emission
            if handle not in self._handlers:
                continue
            invoked += 1
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error("Emitter '%s' handler error on '%s': %s", self._name or "unnamed", event_name, e)
        return invoked

    def handler_count(self, event_name: str | None = None) -> int:
        with self._lock:
            if event_name is None:
                return len(self._handlers)
            return sum(1 for name, _ in self._handlers.values() if name == event_name)

    def __repr__(self) -> str:
        name = f" '{self._name}'" if self._name else ""
        return f"<Emitter{name}: {self.handler_count()} handler(s)>"
