"""A Space Invaders arcade game on pygame, with game logic that runs without a window."""

__version__ = "0.1.0"