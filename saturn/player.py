"""The player-controlled character."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol

from saturn.background import SCREEN_HEIGHT, SCREEN_WIDTH
from saturn.gameobject import GameObject
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

NAME = "player"
ORIGINAL_X = SCREEN_WIDTH // 2 - BALL_SIZE // 2
ORIGINAL_Y = SCREEN_HEIGHT - BALL_SIZE


class Button(Enum):
    """The directional buttons the player reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class Controller(Protocol):
    """A source of button state, refreshed once per frame."""

    def update(self) -> None: ...

    def is_pressed(self, button: Button) -> bool: ...


class Player(GameObject, Publisher, Subscriber):
    """A character moved by buttons and sent home when something touches it."""

    def __init__(self, image: Any, controller: Controller) -> None:
        self.sprite = Sprite(ORIGINAL_X, ORIGINAL_Y, 1, image)
        self.controller = controller
        self._listener = Listener()
        self._signals_out = Observable(NAME)

    def _bounds(self) -> Rect:
        return Rect(self.sprite.x, self.sprite.y, BALL_SIZE, BALL_SIZE)

    def behave(self) -> None:
        """Move within the screen, publish the position, and handle collisions."""
        self.controller.update()
        sprite = self.sprite
        pressed = self.controller.is_pressed

        if pressed(Button.UP) and sprite.y > 0:
            sprite.update_pos(Direction.UP)
        if pressed(Button.DOWN) and sprite.y < SCREEN_HEIGHT - BALL_SIZE:
            sprite.update_pos(Direction.DOWN)
        if pressed(Button.LEFT) and sprite.x > 0:
            sprite.update_pos(Direction.LEFT)
        if pressed(Button.RIGHT) and sprite.x < SCREEN_WIDTH - BALL_SIZE:
            sprite.update_pos(Direction.RIGHT)

        self._signals_out.notify(Event(EventKind.POSITION, self._bounds()))

        for event in self._listener.poll_events():
            if event.kind is EventKind.POSITION and event.rect.touches(self._bounds()):
                sprite.x = ORIGINAL_X
                sprite.y = ORIGINAL_Y

    def render(self, frame: Any) -> None:
        """Draw the player."""
        self.sprite.render(frame)

    def observer(self) -> Listener:
        """Return the listener that receives positions of obstacles."""
        return self._listener

    def register_subscription(self, subscriber: Listener, event: Event) -> None:
        """Subscribe ``subscriber`` to the player's events of ``event``'s kind."""
        self._signals_out.register_subscription(subscriber, event)