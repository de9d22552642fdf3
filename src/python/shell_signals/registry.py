# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Registry for tracking handler registrations by event source.

Every handler connected through a registry is remembered under the object it
was connected to, so it can be released later either one at a time or in
bulk when the owning component goes away.

Example:
    signals = SubscriptionRegistry()
    signals.connect(window, "focus", on_focus)
    signals.connect_once(window, "unmanaged", on_gone)
    ...
    signals.destroy()  # Releases every handler connected above
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterator

from . import log
from .sources import EventSource, as_event_source


class _StrongRef:
    """Stand-in for weakref.ref on sources that do not support weak references."""

    __slots__ = ("_obj",)

    def __init__(self, obj: object) -> None:
        self._obj = obj

    def __call__(self) -> object:
        return self._obj


@dataclass(slots=True)
class _Tracked:
    ref: Callable[[], object | None]
    handles: list[Hashable] = field(default_factory=list)


class SubscriptionRegistry:
    """Tracks handler registrations per source for guaranteed release.

    Sources are keyed by identity and referenced weakly, so tracking a source
    never keeps it alive. Sources without weak reference support are the
    exception: they are held strongly until their last handle is released.
    An entry exists only while its source has at least one tracked handle.
    """

    def __init__(self) -> None:
        self._tracked: dict[int, _Tracked] = {}

    def connect(self, source: object, event_name: str, handler: Callable[..., Any]) -> Hashable:
        """Connect a handler to a source and track the returned handle.

        Args:
            source: Object to connect to.
            event_name: Name of the event on the source.
            handler: Callback invoked by the source.

        Returns:
            The source's handle for this registration.
        """
        handle = as_event_source(source).register(event_name, handler)
        self._get_or_create(source).handles.append(handle)
        log.debug("#signals", "connect", event_name, source, handle)
        return handle

    def connect_once(self, source: object, event_name: str, handler: Callable[..., Any]) -> Hashable:
        """Connect a handler that disconnects itself the first time it fires.

        The registration is released before ``handler`` runs, so neither a
        re-entrant emission nor an exception in the handler can leave it
        connected.

        Returns:
            Handle that can be passed to disconnect() to cancel before firing.
        """
        handle = None
        fired = False

        def once(*args: Any, **kwargs: Any) -> Any:
            nonlocal fired
            # Cancelled by an earlier handler of a snapshot dispatch
            if fired or (handle is not None and handle not in self.handles(source)):
                return None
            fired = True
            if handle is not None:
                self.disconnect(source, handle)
            return handler(*args, **kwargs)

        handle = self.connect(source, event_name, once)
        if fired:
            # Fired synchronously from inside register()
            self.disconnect(source, handle)
        return handle

    def disconnect(self, source: object, handle: Hashable | None = None) -> None:
        """Release one handle, or every handle, tracked for a source.

        Unknown sources and handles are ignored.
        """
        entry = self._entry(source)
        if entry is None:
            return

        if handle is None:
            self._release_all(source, entry)
            return

        if handle not in entry.handles:
            return
        self._release(source, as_event_source(source), entry, handle)
        log.debug("#signals", "disconnect", source, handle)
        self._drop_if_empty(source, entry)

    def destroy(self) -> int:
        """Release every tracked handle on every source. Returns count."""
        count = 0
        for key, entry in list(self._tracked.items()):
            source = entry.ref()
            if source is None:
                self._tracked.pop(key, None)
                continue
            count += self._release_all(source, entry)
        if count:
            log.debug("#signals", "destroy", f"released {count} handle(s)")
        return count

    def handles(self, source: object) -> tuple[Hashable, ...]:
        """Handles currently tracked for a source, in connection order."""
        entry = self._entry(source)
        return tuple(entry.handles) if entry else ()

    def handle_count(self) -> int:
        return sum(len(entry.handles) for entry in self._tracked.values())

    def sources(self) -> list[object]:
        """Tracked sources that are still alive."""
        return [src for src in (entry.ref() for entry in self._tracked.values()) if src is not None]

    def __contains__(self, source: object) -> bool:
        return self._entry(source) is not None

    def __len__(self) -> int:
        return len(self._tracked)

    def __iter__(self) -> Iterator[object]:
        return iter(self.sources())

    def __enter__(self) -> SubscriptionRegistry:
        return self

    def __exit__(self, *args: object) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return f"<SubscriptionRegistry: {len(self)} source(s), {self.handle_count()} handle(s)>"

    def _entry(self, source: object) -> _Tracked | None:
        entry = self._tracked.get(id(source))
        if entry is None or entry.ref() is not source:
            return None
        return entry

    def _get_or_create(self, source: object) -> _Tracked:
        entry = self._entry(source)
        if entry is None:
            key = id(source)
            try:
                ref = weakref.ref(source, lambda r, key=key: self._forget(key, r))
            except TypeError:
                log.warn(source, "does not support weak references, kept alive while tracked")
                ref = _StrongRef(source)
            entry = _Tracked(ref)
            self._tracked[key] = entry
        return entry

    def _release_all(self, source: object, entry: _Tracked) -> int:
        primitives = as_event_source(source)
        count = 0
        for handle in list(entry.handles):
            # Released re-entrantly by an earlier release
            if handle not in entry.handles:
                continue
            self._release(source, primitives, entry, handle)
            count += 1
        log.debug("#signals", "disconnect all", source, f"{count} handle(s)")
        self._drop_if_empty(source, entry)
        return count

    def _release(self, source: object, primitives: EventSource, entry: _Tracked, handle: Hashable) -> None:
        # Untracked before the call so a re-entrant disconnect cannot release it twice
        index = entry.handles.index(handle)
        del entry.handles[index]
        try:
            primitives.release(handle)
        except Exception:
            entry.handles.insert(index, handle)
            self._tracked.setdefault(id(source), entry)
            raise

    def _drop_if_empty(self, source: object, entry: _Tracked) -> None:
        if not entry.handles and self._tracked.get(id(source)) is entry:
            del self._tracked[id(source)]

    def _forget(self, key: int, ref: object) -> None:
        entry = self._tracked.get(key)
        if entry is not None and entry.ref is ref:
            del self._tracked[key]
            log.debug("#signals", "source collected", f"{len(entry.handles)} handle(s)")
