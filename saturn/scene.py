"""The scene that wires all game objects together."""

from __future__ import annotations

import logging
from typing import Any

from saturn.background import SCREEN_WIDTH, Background
from saturn.gameobject import GameObject
from saturn.mathutil import random_constrained_positive
from saturn.movingstone import MovingStone
from saturn.observer import Event, EventKind, Listener, Rect, Subscriber
from saturn.player import Controller, Player
from saturn.runningstone import RunningStone
from saturn.sprite import BALL_SIZE

logger = logging.getLogger(__name__)

STONE_ROWS = range(1, 9)
RUNNING_STONE_START = (20, 0)

_POSITION = Event(EventKind.POSITION, Rect(0, 0, 0, 0))
_RESET = Event(EventKind.RESET)


class Scene(GameObject, Subscriber):
    """All game objects plus the event routes between them.

    Moving stones report positions to the player, the player reports its
    position to the running stone, and the running stone reports resets to
    the scene, which counts them as score.
    """

    def __init__(
        self,
        controller: Controller,
        *,
        ball: Any,
        paddle_mid: Any,
        paddle_end: Any,
        crab: Any,
        background: Any,
    ) -> None:
        self._listener = Listener()
        self.score = 0

        self.player = Player(crab, controller)
        self.running_stone = RunningStone(*RUNNING_STONE_START, ball)

        self.moving_stones: list[MovingStone] = []
        for row in STONE_ROWS:
            image = paddle_mid if row % 2 == 0 else paddle_end
            stone = MovingStone(
                random_constrained_positive(SCREEN_WIDTH - BALL_SIZE),
                BALL_SIZE * row,
                image,
            )
            stone.register_subscription(self.player.observer(), _POSITION)
            self.moving_stones.append(stone)

        self.player.register_subscription(self.running_stone.observer(), _POSITION)
        self.running_stone.register_subscription(self._listener, _RESET)

        self.background = Background(background)
        self.game_objects: list[GameObject] = [
            *self.moving_stones,
            self.player,
            self.running_stone,
            self.background,
        ]

    def behave(self) -> None:
        """Advance every object one frame, then count any resets as score."""
        for game_object in self.game_objects:
            game_object.behave()

        for event in self._listener.poll_events():
            if event.kind is EventKind.RESET:
                self.score += 1
                logger.info("score")

    def render(self, frame: Any) -> None:
        """Draw the background first, then every other object on top."""
        self.background.render(frame)
        for game_object in self.game_objects:
            if game_object is not self.background:
                game_object.render(frame)

    def observer(self) -> Listener:
        """Return the scene's listener."""
        return self._listener