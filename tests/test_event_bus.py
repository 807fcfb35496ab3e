from responsive.services.event_bus import EventBus, ResponsiveEvent


def test_subscribe_publish_basic():
    bus = EventBus()
    received = []
    bus.subscribe(ResponsiveEvent.BREAKPOINT_CHANGED, lambda evt: received.append(evt))
    bus.publish(ResponsiveEvent.BREAKPOINT_CHANGED, {"name": "md"})
    assert [(e.name, e.payload) for e in received] == [("breakpoint_changed", {"name": "md"})]


def test_enum_and_string_keys_match():
    bus = EventBus()
    hits = []
    bus.subscribe("selection_failed", hits.append)
    bus.publish(ResponsiveEvent.SELECTION_FAILED)
    assert len(hits) == 1
    assert bus.subscriber_count(ResponsiveEvent.SELECTION_FAILED) == 1


def test_once_subscription():
    bus = EventBus()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    bus.subscribe("custom", incr, once=True)
    bus.publish("custom")
    bus.publish("custom")
    assert count == 1
    assert bus.subscriber_count("custom") == 0


def test_unsubscribe():
    bus = EventBus()
    hits = []
    sub = bus.subscribe("custom", hits.append)
    bus.unsubscribe(sub)
    bus.publish("custom")
    assert hits == []
    assert not sub.active


def test_error_isolation():
    bus = EventBus()
    order = []

    def bad(_):
        order.append("bad")
        raise RuntimeError("boom")

    def good(_):
        order.append("good")

    bus.subscribe("custom", bad)
    bus.subscribe("custom", good)
    bus.publish("custom", 123)
    assert order == ["bad", "good"]
    assert len(bus.errors) == 1
    bus.clear()
    assert bus.errors == []
