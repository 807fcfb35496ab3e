"""Tests for selection change tracking."""

import logging

from responsive.breakpoints import BreakpointSet
from responsive.errors import UnresolvableSelection
from responsive.selector import select
from responsive.services.event_bus import EventBus, ResponsiveEvent
from responsive.services.service_locator import services
from responsive.settings import ResponsiveSettings
from responsive.tracking import SelectionTracker, get_selection_tracker

BPS = BreakpointSet(sm="A", md="B", xl="C")


def _collect(bus, event):
    hits = []
    bus.subscribe(event, lambda evt: hits.append(evt.payload))
    return hits


def test_publishes_only_on_change():
    bus = EventBus()
    hits = _collect(bus, ResponsiveEvent.BREAKPOINT_CHANGED)
    tracker = SelectionTracker(bus)
    assert tracker.observe("main", select(BPS, 800), 800) is True
    assert tracker.observe("main", select(BPS, 900), 900) is False
    assert tracker.observe("main", select(BPS, 1300), 1300) is True
    assert [(h["name"], h["previous"], h["scalar"]) for h in hits] == [
        ("md", None, 800),
        ("xl", "md", 1300),
    ]
    assert tracker.current("main").name == "xl"


def test_keys_tracked_independently():
    tracker = SelectionTracker(EventBus())
    assert tracker.observe("a", select(BPS, 800), 800)
    assert tracker.observe("b", select(BPS, 800), 800)
    tracker.forget("a")
    assert tracker.current("a") is None
    assert tracker.observe("a", select(BPS, 800), 800)


def test_uses_registered_bus_when_not_given():
    bus = EventBus()
    services.register("event_bus", bus)
    hits = _collect(bus, ResponsiveEvent.BREAKPOINT_CHANGED)
    SelectionTracker().observe("k", select(BPS, 10), 10)
    assert hits[0]["name"] == "sm"


def test_no_bus_registered_is_quiet():
    assert SelectionTracker().observe("k", select(BPS, 10), 10) is True


def test_publishing_can_be_disabled():
    bus = EventBus()
    hits = _collect(bus, ResponsiveEvent.BREAKPOINT_CHANGED)
    tracker = SelectionTracker(bus, ResponsiveSettings(publish_events=False))
    tracker.observe("k", select(BPS, 800), 800)
    assert hits == []


def test_report_failure_logs_and_publishes(caplog):
    bus = EventBus()
    hits = _collect(bus, ResponsiveEvent.SELECTION_FAILED)
    tracker = SelectionTracker(bus)
    tracker.observe("k", select(BPS, 800), 800)
    with caplog.at_level(logging.WARNING, logger="responsive.tracking"):
        tracker.report_failure("k", 640, UnresolvableSelection("empty"))
    assert hits == [{"key": "k", "scalar": 640, "message": "empty"}]
    assert tracker.current("k") is None
    assert any("selection failed" in r.getMessage() for r in caplog.records)


def test_selection_change_logged_at_debug(caplog):
    tracker = SelectionTracker(EventBus())
    with caplog.at_level(logging.DEBUG, logger="responsive.tracking"):
        tracker.observe("k", select(BPS, 1000), 1000)
    assert any("-> md" in r.getMessage() for r in caplog.records)


def test_shared_tracker_registered_once():
    first = get_selection_tracker()
    assert get_selection_tracker() is first
    assert services.get("selection_tracker") is first
