"""Laser shots fired by the player and by the aliens."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .block import Rect

LASER_WIDTH = 4
LASER_HEIGHT = 15
LASER_COLOR = (243, 246, 63)
TOP_LIMIT = 25
BOTTOM_OFFSET = 100


@dataclass
class Laser:
    """A shot moving vertically by ``speed`` pixels per frame."""

    x: float
    y: float
    speed: int
    active: bool = True

    def update(self, screen_width: int) -> None:
        """Move the shot and deactivate it once it leaves the playfield."""
        self.y += self.speed
        if self.active and (self.y > screen_width - BOTTOM_OFFSET or self.y < TOP_LIMIT):
            self.active = False

    def rect(self) -> Rect:
        return Rect(self.x, self.y, LASER_WIDTH, LASER_HEIGHT)

    def draw(self, surface: pygame.Surface) -> None:
        if self.active:
            pygame.draw.rect(
                surface,
                LASER_COLOR,
                pygame.Rect(int(self.x), int(self.y), LASER_WIDTH, LASER_HEIGHT),
            )