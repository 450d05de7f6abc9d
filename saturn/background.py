"""The static backdrop behind every other object, and the screen size."""

from __future__ import annotations

from typing import Any

from saturn.gameobject import GameObject

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 160


class Background(GameObject):
    """A full-screen image drawn behind everything else."""

    def __init__(self, image: Any) -> None:
        self.image = image

    def behave(self) -> None:
        """The background never changes."""

    def render(self, frame: Any) -> None:
        """Draw the backdrop at the top-left corner of ``frame``."""
        frame.blit(self.image, (0, 0))