"""The stone the player pushes down to the bottom of the screen."""

from __future__ import annotations

from typing import Any

from saturn.background import SCREEN_HEIGHT, SCREEN_WIDTH
from saturn.gameobject import GameObject
from saturn.mathutil import random_constrained_positive
from saturn.observer import (
    Event,
    EventKind,
    Listener,
    Observable,
    Publisher,
    Rect,
    Subscriber,
)
from saturn.sprite import BALL_SIZE, Direction, Sprite

NAME = "running stone"
PUSH_STEPS = 5


class RunningStone(GameObject, Publisher, Subscriber):
    """A stone pushed downwards by whatever touches it.

    On reaching the bottom of the screen it returns to the top at a random
    column and publishes a reset.
    """

    def __init__(self, x_start: int, y_start: int, image: Any) -> None:
        self.sprite = Sprite(x_start, y_start, 1, image)
        self._listener = Listener()
        self._observable = Observable(NAME)

    def _bounds(self) -> Rect:
        return Rect(self.sprite.x, self.sprite.y, BALL_SIZE, BALL_SIZE)

    def behave(self) -> None:
        """React to touching positions, then reset once past the bottom edge."""
        for event in self._listener.poll_events():
            if event.kind is EventKind.POSITION and event.rect.touches(self._bounds()):
                for _ in range(PUSH_STEPS):
                    self.sprite.update_pos(Direction.DOWN)

        if self.sprite.y >= SCREEN_HEIGHT:
            new_x = random_constrained_positive(SCREEN_WIDTH - BALL_SIZE)
            self.sprite.y = 0
            self.sprite.x = new_x
            self._observable.notify(Event(EventKind.RESET))

    def render(self, frame: Any) -> None:
        """Draw the stone."""
        self.sprite.render(frame)

    def observer(self) -> Listener:
        """Return the listener that receives positions pushing this stone."""
        return self._listener

    def register_subscription(self, subscriber: Listener, event: Event) -> None:
        """Subscribe ``subscriber`` to this stone's events of ``event``'s kind."""
        self._observable.register_subscription(subscriber, event)