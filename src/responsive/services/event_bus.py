"""Synchronous publish/subscribe for responsive layout notifications.

Adapters publish when the selected breakpoint slot changes or when a
selection cannot be made, so unrelated views can react (e.g. collapse a
sidebar) without holding references to each other.

A failing handler does not interrupt dispatch to the remaining handlers;
its exception is recorded in ``EventBus.errors``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "ResponsiveEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class ResponsiveEvent(str, Enum):
    BREAKPOINT_CHANGED = "breakpoint_changed"
    SELECTION_FAILED = "selection_failed"


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | ResponsiveEvent) -> str:
    return name.value if isinstance(name, ResponsiveEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Handlers run outside the lock on a snapshot of the subscriber list, so a
    handler may subscribe or unsubscribe without deadlocking.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, Exception]] = []

    def subscribe(
        self, name: str | ResponsiveEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = [s for s in self._subs.get(sub.event, ()) if s is not sub]
            if bucket:
                self._subs[sub.event] = bucket
            else:
                self._subs.pop(sub.event, None)
        sub.active = False

    def publish(self, name: str | ResponsiveEvent, payload: Any = None) -> Event:
        evt = Event(name=_key(name), payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(evt.name, ()))
        for sub in subs:
            if not sub.active:
                continue
            if sub.once:
                self.unsubscribe(sub)
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
        return evt

    def subscriber_count(self, name: str | ResponsiveEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, Exception]]:
        with self._lock:
            return list(self._errors)

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()
