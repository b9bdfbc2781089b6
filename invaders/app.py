"""Window, main loop and heads-up display."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from .game import Game

GREY = (29, 29, 27)
YELLOW = (234, 216, 63)
OFFSET = 50
WINDOW_WIDTH = 750
WINDOW_HEIGHT = 700
FPS = 60
FONT_FILE = "Font/monogram.ttf"
FONT_SIZE = 34

IMAGE_FILES = {
    "alien_1": "Graphics/alien_1.png",
    "alien_2": "Graphics/alien_2.png",
    "alien_3": "Graphics/alien_3.png",
    "spaceship": "Graphics/spaceship.png",
    "mystery": "Graphics/mystery.png",
}


def format_with_leading_zeros(number: int, width: int) -> str:
    """Pad the decimal form of ``number`` with zeros on the left up to ``width``."""
    text = str(number)
    return "0" * (width - len(text)) + text


def _load_font() -> pygame.font.Font:
    try:
        return pygame.font.Font(FONT_FILE, FONT_SIZE)
    except (FileNotFoundError, OSError):
        return pygame.font.Font(None, FONT_SIZE)


def _draw_hud(screen: pygame.Surface, font: pygame.font.Font, game: Game,
              ship_image: pygame.Surface) -> None:
    pygame.draw.rect(screen, YELLOW, pygame.Rect(10, 10, 780, 780), width=2,
                     border_radius=int(0.18 * 780 / 2))
    pygame.draw.line(screen, YELLOW, (25, 730), (775, 730), 3)

    status = f"LEVEL {game.level:02d}" if game.run else "GAME OVER"
    screen.blit(font.render(status, True, YELLOW), (570, 740))

    for i in range(max(game.lives, 0)):
        screen.blit(ship_image, (50 + 50 * i, 745))

    screen.blit(font.render("SCORE:", True, YELLOW), (50, 15))
    screen.blit(font.render(format_with_leading_zeros(game.score, 5), True, YELLOW), (50, 40))
    screen.blit(font.render("HIGH SCORE:", True, YELLOW), (570, 15))
    screen.blit(
        font.render(format_with_leading_zeros(game.high_score, 5), True, YELLOW), (655, 40)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="invaders", description="Play Space Invaders.")
    parser.parse_args(argv)

    pygame.init()
    pygame.mixer.init()
    width, height = WINDOW_WIDTH + OFFSET, WINDOW_HEIGHT + OFFSET * 2
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Space Invaders")

    font = _load_font()
    images = {name: pygame.image.load(path).convert_alpha() for name, path in IMAGE_FILES.items()}
    explosion = pygame.mixer.Sound("Sounds/explosion.ogg")
    laser_sound = pygame.mixer.Sound("Sounds/laser.ogg")
    pygame.mixer.music.load("Sounds/music.ogg")
    pygame.mixer.music.play(-1)

    game = Game(
        width,
        height,
        {kind: images[f"alien_{kind}"].get_size() for kind in (1, 2, 3)},
        images["spaceship"].get_size(),
        images["mystery"].get_size(),
        on_explosion=explosion.play,
        on_laser=laser_sound.play,
    )

    clock = pygame.time.Clock()
    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            now = pygame.time.get_ticks() / 1000.0
            keys = pygame.key.get_pressed()
            game.handle_input(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_SPACE], now)
            game.update(now, bool(keys[pygame.K_RETURN]))

            screen.fill(GREY)
            _draw_hud(screen, font, game, images["spaceship"])
            game.draw(screen, images)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.mixer.music.stop()
        pygame.quit()
    return 0