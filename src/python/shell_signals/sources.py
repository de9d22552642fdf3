# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Event source protocol and adapters.

The registry only needs two things from an object it connects to: a way to
register a handler for a named event, getting a handle back, and a way to
release that handle again. Objects that already speak a different dialect
(``connect``/``disconnect`` toolkits, ``subscribe``/``unsubscribe`` buses)
are wrapped by an adapter on demand.

Example:
    class Button:
        def connect(self, name, handler): ...
        def disconnect(self, handler_id): ...

    source = as_event_source(Button())  # -> ConnectAdapter
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Protocol, runtime_checkable


@runtime_checkable
class EventSource(Protocol):
    """Protocol for objects that emit named events.

    Any class with register() and release() satisfies this protocol.
    """

    def register(self, event_name: str, handler: Callable[..., Any]) -> Hashable:
        """Register a handler for an event.

        Args:
            event_name: Name of the event.
            handler: Callback to invoke when the event fires.

        Returns:
            Handle identifying this registration.
        """
        ...

    def release(self, handle: Hashable) -> None:
        """Release a registration previously returned by register()."""
        ...


class ConnectAdapter:
    """Adapts objects with ``connect(name, handler)`` / ``disconnect(id)``."""

    __slots__ = ("_obj",)

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def register(self, event_name: str, handler: Callable[..., Any]) -> Hashable:
        return self._obj.connect(event_name, handler)

    def release(self, handle: Hashable) -> None:
        self._obj.disconnect(handle)


class SubscribeAdapter:
    """Adapts objects with ``subscribe(name, handler)``.

    A callable token is treated as the unsubscribe function itself; any other
    token is handed back to the object's ``unsubscribe()``.
    """

    __slots__ = ("_obj",)

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def register(self, event_name: str, handler: Callable[..., Any]) -> Hashable:
        return self._obj.subscribe(event_name, handler)

    def release(self, handle: Hashable) -> None:
        if callable(handle):
            handle()
        else:
            self._obj.unsubscribe(handle)


def as_event_source(obj: Any) -> EventSource:
    """Return an EventSource view of ``obj``.

    Raises:
        TypeError: If ``obj`` has no known registration primitive.
    """
    if isinstance(obj, EventSource):
        return obj
    if callable(getattr(obj, "connect", None)) and callable(getattr(obj, "disconnect", None)):
        return ConnectAdapter(obj)
    if callable(getattr(obj, "subscribe", None)):
        return SubscribeAdapter(obj)
    raise TypeError(f"{type(obj).__name__} is not an event source")
