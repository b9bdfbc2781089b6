"""The bonus ship that crosses the top of the screen."""

from __future__ import annotations

import random

import pygame

from .block import Rect

SPAWN_Y = 90
MARGIN = 25
SPEED = 3
IMAGE_FILE = "Graphics/mystery.png"


class MysteryShip:
    """A ship with a ``width`` by ``height`` sprite; dead until spawned."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.x = 0.0
        self.y = 0.0
        self.speed = 0
        self.alive = False

    def spawn(self, screen_width: int, side: int | None = None) -> None:
        """Bring the ship in from the left (side 0) or right (side 1); random if None."""
        if side is None:
            side = random.randint(0, 1)
        self.y = float(SPAWN_Y)
        if side == 0:
            self.x = float(MARGIN)
            self.speed = SPEED
        else:
            self.x = float(screen_width - self.width - MARGIN)
            self.speed = -SPEED
        self.alive = True

    def update(self, screen_width: int) -> None:
        if self.alive:
            self.x += self.speed
            if self.x < MARGIN or self.x > screen_width - MARGIN:
                self.alive = False

    def rect(self) -> Rect:
        if self.alive:
            return Rect(self.x, self.y, float(self.width), float(self.height))
        return Rect(self.x, self.y, 0.0, 0.0)

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        if self.alive:
            surface.blit(image, (int(self.x), int(self.y)))