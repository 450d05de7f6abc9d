"""Positioned, movable images."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from saturn.gameobject import GameObject

BALL_SIZE = 16


class Direction(Enum):
    """A direction of movement on screen."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class Sprite(GameObject):
    """An image at a screen position that moves ``velocity`` pixels per step."""

    x: int
    y: int
    velocity: int
    image: Any

    def update_pos(self, direction: Direction) -> None:
        """Move one step of ``velocity`` pixels in ``direction``."""
        dx, dy = _STEPS[direction]
        self.x += dx * self.velocity
        self.y += dy * self.velocity

    def behave(self) -> None:
        """A sprite has no behaviour of its own."""

    def render(self, frame: Any) -> None:
        """Draw the image onto ``frame`` at the sprite's position."""
        frame.blit(self.image, (self.x, self.y))