"""Destructible shields made of blocks."""

from __future__ import annotations

import pygame

from .block import BLOCK_SIZE, Block

# "#" marks a block, "." an empty cell.
GRID = (
    "." * 4 + "#" * 15 + "." * 4,
    "." * 3 + "#" * 17 + "." * 3,
    "." * 2 + "#" * 19 + "." * 2,
    "." * 1 + "#" * 21 + "." * 1,
    *("#" * 23,) * 6,
    "#" * 6 + "." * 11 + "#" * 6,
    "#" * 5 + "." * 13 + "#" * 5,
    "#" * 4 + "." * 15 + "#" * 4,
)


def obstacle_width() -> int:
    """Width of an obstacle in pixels."""
    return len(GRID[0]) * BLOCK_SIZE


class Obstacle:
    """A shield whose top-left corner is at ``(x, y)``."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.blocks = [
            Block(x + col * BLOCK_SIZE, y + row * BLOCK_SIZE)
            for row, line in enumerate(GRID)
            for col, cell in enumerate(line)
            if cell == "#"
        ]

    def draw(self, surface: pygame.Surface) -> None:
        for block in self.blocks:
            block.draw(surface)