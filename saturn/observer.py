"""Event propagation between game objects using an observer pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    def touches(self, other: Rect) -> bool:
        """Return whether the two rectangles overlap."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class EventKind(IntEnum):
    """The kinds of event; subscriptions are keyed by kind alone."""

    POSITION = 0
    RESET = 1


@dataclass(frozen=True)
class Event:
    """An event; ``POSITION`` events carry a rectangle, ``RESET`` events none."""

    kind: EventKind
    rect: Optional[Rect] = None

    def __post_init__(self) -> None:
        if self.kind is EventKind.POSITION and self.rect is None:
            raise ValueError("a position event needs a rect")
        if self.kind is EventKind.RESET and self.rect is not None:
            raise ValueError("a reset event carries no rect")


class Listener:
    """Collects events delivered to it until they are polled."""

    def __init__(self) -> None:
        self._ledger: list[Event] = []

    def receive(self, event: Event) -> None:
        """Append ``event`` to the ledger."""
        self._ledger.append(event)

    def poll_events(self) -> list[Event]:
        """Return the events received so far, in order, and clear the ledger."""
        events, self._ledger = self._ledger, []
        return events


class Publisher(ABC):
    """Something listeners can subscribe to."""

    @abstractmethod
    def register_subscription(self, subscriber: Listener, event: Event) -> None:
        """Deliver future events of ``event``'s kind to ``subscriber``."""


class Subscriber(ABC):
    """Something that owns a listener."""

    @abstractmethod
    def observer(self) -> Listener:
        """Return the listener that receives this object's events."""


class Observable(Publisher):
    """Dispatches events to the listeners subscribed to their kind."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: dict[EventKind, list[Listener]] = {}

    def notify(self, event: Event) -> None:
        """Deliver ``event`` to every listener subscribed to its kind."""
        for listener in self._subscribers.get(event.kind, ()):
            listener.receive(event)

    def register_subscription(self, subscriber: Listener, event: Event) -> None:
        """Subscribe ``subscriber`` to events of the same kind as ``event``."""
        self._subscribers.setdefault(event.kind, []).append(subscriber)