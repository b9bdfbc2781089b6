"""The invading aliens."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .block import Rect

IMAGE_FILES = {
    1: "Graphics/alien_1.png",
    2: "Graphics/alien_2.png",
    3: "Graphics/alien_3.png",
}
POINTS = {1: 100, 2: 200, 3: 300}


@dataclass
class Alien:
    """An alien of kind 1, 2 or 3 whose sprite is ``width`` by ``height``."""

    kind: int
    x: float
    y: float
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.kind not in IMAGE_FILES:
            raise ValueError(f"unknown alien kind: {self.kind}")

    @property
    def points(self) -> int:
        """Score awarded for shooting this alien."""
        return POINTS[self.kind]

    def update(self, direction: int) -> None:
        self.x += direction

    def rect(self) -> Rect:
        return Rect(self.x, self.y, float(self.width), float(self.height))

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        surface.blit(image, (int(self.x), int(self.y)))