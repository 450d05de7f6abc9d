import pytest

from saturn.observer import (
    Event,
    EventKind,
    Listener,
    Observable,
    Publisher,
    Rect,
    Subscriber,
)


def _position(x, y):
    return Event(EventKind.POSITION, Rect(x, y, 16, 16))


def test_overlapping_rects_touch_symmetrically():
    a = Rect(0, 0, 16, 16)
    b = Rect(8, 8, 16, 16)
    assert a.touches(b)
    assert b.touches(a)


def test_adjacent_rects_do_not_touch():
    a = Rect(0, 0, 16, 16)
    assert not a.touches(Rect(16, 0, 16, 16))
    assert not a.touches(Rect(0, 16, 16, 16))


def test_distant_rects_do_not_touch():
    assert not Rect(0, 0, 16, 16).touches(Rect(100, 100, 16, 16))


def test_rect_touches_itself():
    r = Rect(5, 7, 16, 16)
    assert r.touches(r)


def test_position_event_requires_rect():
    with pytest.raises(ValueError):
        Event(EventKind.POSITION)


def test_reset_event_rejects_rect():
    with pytest.raises(ValueError):
        Event(EventKind.RESET, Rect(0, 0, 1, 1))


def test_events_compare_by_value():
    assert _position(1, 2) == _position(1, 2)
    assert _position(1, 2) != _position(2, 1)
    assert Event(EventKind.RESET) == Event(EventKind.RESET)


def test_listener_poll_returns_in_order_and_clears():
    listener = Listener()
    first, second = _position(1, 1), Event(EventKind.RESET)
    listener.receive(first)
    listener.receive(second)
    assert listener.poll_events() == [first, second]
    assert listener.poll_events() == []


def test_notify_reaches_subscribers_of_same_kind_only():
    source = Observable("source")
    positions, resets = Listener(), Listener()
    source.register_subscription(positions, _position(0, 0))
    source.register_subscription(resets, Event(EventKind.RESET))

    moved = _position(30, 40)
    source.notify(moved)
    source.notify(Event(EventKind.RESET))

    assert positions.poll_events() == [moved]
    assert resets.poll_events() == [Event(EventKind.RESET)]


def test_subscription_key_ignores_rect_contents():
    source = Observable("source")
    listener = Listener()
    source.register_subscription(listener, Event(EventKind.POSITION, Rect(0, 0, 0, 0)))
    moved = _position(99, 12)
    source.notify(moved)
    assert listener.poll_events() == [moved]


def test_notify_reaches_every_subscriber():
    source = Observable("source")
    listeners = [Listener() for _ in range(3)]
    for listener in listeners:
        source.register_subscription(listener, Event(EventKind.RESET))
    source.notify(Event(EventKind.RESET))
    assert [l.poll_events() for l in listeners] == [[Event(EventKind.RESET)]] * 3


def test_notify_without_subscribers_delivers_nothing():
    source = Observable("source")
    listener = Listener()
    source.register_subscription(listener, Event(EventKind.RESET))
    source.notify(_position(0, 0))
    assert listener.poll_events() == []


def test_observable_keeps_name_and_is_publisher():
    source = Observable("movingstone")
    assert source.name == "movingstone"
    assert isinstance(source, Publisher)


def test_subscriber_is_abstract():
    with pytest.raises(TypeError):
        Subscriber()