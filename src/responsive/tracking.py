"""Selection change tracking.

Layouts re-run selection on every resize, but most resizes stay within the
same breakpoint bracket. ``SelectionTracker`` remembers the last selected
slot per key and only reports (log + ``breakpoint_changed`` event) when the
slot actually changes.

Event payloads:
    breakpoint_changed: {"key", "name", "threshold", "scalar", "previous"}
    selection_failed:   {"key", "scalar", "message"}
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, Hashable, Optional

from .breakpoints import Slot
from .errors import ResponsiveError
from .services.event_bus import EventBus, ResponsiveEvent
from .services.service_locator import services
from .settings import ResponsiveSettings

__all__ = ["SelectionTracker", "get_selection_tracker", "forget_selection"]

log = logging.getLogger(__name__)


class SelectionTracker:
    """Per-key record of the last selected slot.

    Parameters
    ----------
    bus: EventBus | None
        Bus to publish on. When omitted the ``event_bus`` service is looked up
        at publish time; nothing is published if none is registered.
    settings: ResponsiveSettings | None
        Settings to consult; defaults to ``ResponsiveSettings.get()``.
    """

    def __init__(
        self, bus: EventBus | None = None, settings: ResponsiveSettings | None = None
    ) -> None:
        self._bus = bus
        self._settings = settings
        self._lock = RLock()
        self._last: Dict[Hashable, Slot[Any]] = {}

    @property
    def settings(self) -> ResponsiveSettings:
        return self._settings or ResponsiveSettings.get()

    def observe(self, key: Hashable, selection: Slot[Any], scalar: float) -> bool:
        """Record ``selection`` for ``key``; return True if the slot changed."""
        with self._lock:
            previous = self._last.get(key)
            if previous is not None and previous.name == selection.name:
                return False
            self._last[key] = selection
        if self.settings.log_selections:
            log.debug(
                "breakpoint %s -> %s at %s (threshold %s)",
                key,
                selection.name,
                scalar,
                selection.threshold,
            )
        self._publish(
            ResponsiveEvent.BREAKPOINT_CHANGED,
            {
                "key": key,
                "name": selection.name,
                "threshold": selection.threshold,
                "scalar": scalar,
                "previous": previous.name if previous else None,
            },
        )
        return True

    def report_failure(self, key: Hashable, scalar: float, error: ResponsiveError) -> None:
        with self._lock:
            self._last.pop(key, None)
        log.warning("breakpoint selection failed for %s at %s: %s", key, scalar, error)
        self._publish(
            ResponsiveEvent.SELECTION_FAILED,
            {"key": key, "scalar": scalar, "message": str(error)},
        )

    def current(self, key: Hashable) -> Optional[Slot[Any]]:
        with self._lock:
            return self._last.get(key)

    def forget(self, key: Hashable) -> None:
        with self._lock:
            self._last.pop(key, None)

    def _publish(self, event: ResponsiveEvent, payload: Dict[str, Any]) -> None:
        if not self.settings.publish_events:
            return
        bus = self._bus or services.try_get("event_bus")
        if isinstance(bus, EventBus):
            bus.publish(event, payload)


def get_selection_tracker() -> SelectionTracker:
    tracker = services.try_get("selection_tracker")
    if tracker is None:
        tracker = SelectionTracker()
        services.register("selection_tracker", tracker, allow_override=True)
    return tracker


def forget_selection(key: Hashable) -> None:
    """Drop ``key`` from the shared tracker, if one is registered."""
    tracker = services.try_get("selection_tracker")
    if isinstance(tracker, SelectionTracker):
        tracker.forget(key)
