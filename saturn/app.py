"""The game's window, keyboard input and main loop."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Optional, Sequence

import pygame

from saturn.background import SCREEN_HEIGHT, SCREEN_WIDTH
from saturn.player import Button
from saturn.scene import Scene
from saturn.sprite import BALL_SIZE

FPS = 60

_KEYS = {
    Button.UP: (pygame.K_UP, pygame.K_w),
    Button.DOWN: (pygame.K_DOWN, pygame.K_s),
    Button.LEFT: (pygame.K_LEFT, pygame.K_a),
    Button.RIGHT: (pygame.K_RIGHT, pygame.K_d),
}


class KeyboardInput:
    """Button state read from the keyboard, snapshotted on each update."""

    def __init__(self, read_keys: Optional[Callable[[], Any]] = None) -> None:
        self._read_keys = read_keys or pygame.key.get_pressed
        self._pressed: frozenset[Button] = frozenset()

    def update(self) -> None:
        """Take a fresh snapshot of which buttons are held."""
        keys = self._read_keys()
        self._pressed = frozenset(
            button for button, codes in _KEYS.items() if any(keys[c] for c in codes)
        )

    def is_pressed(self, button: Button) -> bool:
        """Return whether ``button`` was held at the last update."""
        return button in self._pressed


def _make_images() -> dict[str, pygame.Surface]:
    size = (BALL_SIZE, BALL_SIZE)
    half = BALL_SIZE // 2

    ball = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.circle(ball, (200, 200, 190), (half, half), half)

    paddle_mid = pygame.Surface(size, pygame.SRCALPHA)
    paddle_mid.fill((120, 110, 100))

    paddle_end = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.rect(paddle_end, (100, 90, 80), paddle_end.get_rect(), border_radius=4)

    crab = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.ellipse(crab, (220, 70, 50), crab.get_rect().inflate(0, -4))

    background = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    background.fill((235, 215, 160))
    pygame.draw.rect(background, (60, 130, 200), (0, 0, SCREEN_WIDTH, SCREEN_HEIGHT // 3))

    return {
        "ball": ball,
        "paddle_mid": paddle_mid,
        "paddle_end": paddle_end,
        "crab": crab,
        "background": background,
    }


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="saturn", description="Run the game.")
    parser.add_argument("--scale", type=int, default=3, help="window scale factor")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("--scale must be at least 1")
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        window = pygame.display.set_mode(
            (SCREEN_WIDTH * args.scale, SCREEN_HEIGHT * args.scale)
        )
        pygame.display.set_caption("Saturn")
        scene = Scene(KeyboardInput(), **_make_images())
        frame = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        clock = pygame.time.Clock()

        frames = 0
        running = True
        while running and (args.frames is None or frames < args.frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            scene.behave()
            frame.fill((0, 0, 0))
            scene.render(frame)
            pygame.transform.scale(frame, window.get_size(), window)
            pygame.display.flip()
            clock.tick(FPS)
            frames += 1
    finally:
        pygame.quit()
    return 0