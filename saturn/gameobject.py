"""The interface shared by everything that lives in a scene."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class GameObject(ABC):
    """Something that updates its state once per frame and draws itself."""

    @abstractmethod
    def behave(self) -> None:
        """Advance the object's state by one frame."""

    @abstractmethod
    def render(self, frame: Any) -> None:
        """Draw the object onto ``frame``."""