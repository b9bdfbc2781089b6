"""The player's ship."""

from __future__ import annotations

import pygame

from .block import Rect
from .laser import Laser

IMAGE_FILE = "Graphics/spaceship.png"
MARGIN = 25
BOTTOM_OFFSET = 100
STEP = 7
FIRE_INTERVAL = 0.35
LASER_SPEED = -6


class Spaceship:
    """The player's ship on a screen of the given size, with a ``width`` by ``height`` sprite."""

    def __init__(self, screen_width: int, screen_height: int, width: int, height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.width = width
        self.height = height
        self.x = float((screen_width - width) // 2)
        self.y = float(screen_height - height - BOTTOM_OFFSET)
        self.last_fire_time = 0.0
        self.lasers: list[Laser] = []

    def move_left(self) -> None:
        self.x = max(self.x - STEP, float(MARGIN))

    def move_right(self) -> None:
        self.x = min(self.x + STEP, float(self.screen_width - self.width - MARGIN))

    def fire_laser(self, now: float) -> bool:
        """Fire a laser if the cooldown has passed; return whether one was fired."""
        if now - self.last_fire_time < FIRE_INTERVAL:
            return False
        self.lasers.append(Laser(self.x + self.width // 2 - 2, self.y, LASER_SPEED))
        self.last_fire_time = now
        return True

    def rect(self) -> Rect:
        return Rect(self.x, self.y, float(self.width), float(self.height))

    def reset(self) -> None:
        """Return to the starting position and drop all lasers."""
        self.x = (self.screen_width - self.width) / 2.0
        self.y = float(self.screen_height - self.height - BOTTOM_OFFSET)
        self.lasers.clear()

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        surface.blit(image, (int(self.x), int(self.y)))