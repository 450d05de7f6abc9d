"""Stones that drift from right to left across the screen."""

from __future__ import annotations

from typing import Any

from saturn.background import SCREEN_WIDTH
from saturn.gameobject import GameObject
from saturn.mathutil import random_constrained_positive
from saturn.observer import Event, EventKind, Listener, Observable, Publisher, Rect
from saturn.sprite import BALL_SIZE, Direction, Sprite

NAME = "movingstone"
MAX_VELOCITY = 3


def _random_velocity() -> int:
    return random_constrained_positive(MAX_VELOCITY) or 1


class MovingStone(GameObject, Publisher):
    """A stone moving left at a random speed that wraps back to the right edge.

    Each frame it publishes its position; when it wraps it publishes a reset.
    """

    def __init__(self, x_start: int, y_start: int, image: Any) -> None:
        self.sprite = Sprite(x_start, y_start, _random_velocity(), image)
        self._signals_out = Observable(NAME)

    def behave(self) -> None:
        """Move left, or wrap to the right edge with a new speed once off screen."""
        if self.sprite.x + BALL_SIZE <= 0:
            self._signals_out.notify(Event(EventKind.RESET))
            self.sprite.x = SCREEN_WIDTH
            self.sprite.velocity = _random_velocity()
        else:
            self.sprite.update_pos(Direction.LEFT)
        bounds = Rect(self.sprite.x, self.sprite.y, BALL_SIZE, BALL_SIZE)
        self._signals_out.notify(Event(EventKind.POSITION, bounds))

    def render(self, frame: Any) -> None:
        """Draw the stone."""
        self.sprite.render(frame)

    def register_subscription(self, subscriber: Listener, event: Event) -> None:
        """Subscribe ``subscriber`` to this stone's events of ``event``'s kind."""
        self._signals_out.register_subscription(subscriber, event)