"""Game state: the invaders, the player, shields, scoring and levels."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Mapping
from pathlib import Path

import pygame

from .alien import Alien
from .laser import Laser
from .mysteryship import MysteryShip
from .obstacle import Obstacle, obstacle_width
from .spaceship import Spaceship

ALIEN_ROWS = 5
ALIEN_COLUMNS = 11
ALIEN_SPACING = 55
ALIEN_ORIGIN = (75, 110)
ALIEN_MARGIN = 25
ALIEN_DROP = 4
ALIEN_LASER_SPEED = 6
ALIEN_LASER_INTERVAL = 0.35
OBSTACLE_COUNT = 4
OBSTACLE_BOTTOM_OFFSET = 200
MYSTERY_POINTS = 500
LEVEL_BONUS = 1000
START_LIVES = 3
SPAWN_INTERVAL_RANGE = (10, 20)
LEVEL_TEXT_COLOR = (253, 249, 0)

Size = tuple[int, int]


class HighScoreStore:
    """Keeps the best score in a small text file."""

    def __init__(self, path: str | Path = "highscore.txt") -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if there is none readable."""
        try:
            text = self.path.read_text()
        except OSError:
            print("Unable to open file", file=sys.stderr)
            return 0
        try:
            return int(text.split()[0])
        except (IndexError, ValueError):
            return 0

    def save(self, score: int) -> None:
        try:
            self.path.write_text(str(score))
        except OSError:
            print("Unable to open file", file=sys.stderr)


def _alien_kind(row: int) -> int:
    if row == 0:
        return 3
    if row in (1, 2):
        return 2
    return 1


class Game:
    """One running game on a screen of the given size.

    Sprite sizes are given so that the game logic runs without any images;
    sounds are played through the optional callbacks.
    """

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        alien_sizes: Mapping[int, Size],
        spaceship_size: Size,
        mystery_size: Size,
        store: HighScoreStore | None = None,
        rng: random.Random | None = None,
        on_explosion: Callable[[], object] | None = None,
        on_laser: Callable[[], object] | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.alien_sizes = dict(alien_sizes)
        self.store = store if store is not None else HighScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self._on_explosion = on_explosion
        self._on_laser = on_laser
        self._font: pygame.font.Font | None = None

        self.spaceship = Spaceship(screen_width, screen_height, *spaceship_size)
        self.mystery_ship = MysteryShip(*mystery_size)
        self.alien_lasers: list[Laser] = []
        self.obstacles: list[Obstacle] = []
        self.aliens: list[Alien] = []
        self.level = 1
        self.score = 0
        self.lives = START_LIVES
        self.high_score = 0
        self.run = True
        self.alien_direction = 1
        self.time_last_alien_fired = 0.0
        self.time_last_spawn = 0.0
        self.mystery_spawn_interval = 0
        self._init_game()

    # -- setup ---------------------------------------------------------

    def _create_obstacles(self) -> list[Obstacle]:
        width = obstacle_width()
        gap = (self.screen_width - width * OBSTACLE_COUNT) // (OBSTACLE_COUNT + 1)
        y = float(self.screen_height - OBSTACLE_BOTTOM_OFFSET)
        return [
            Obstacle(float((i + 1) * gap + i * width), y) for i in range(OBSTACLE_COUNT)
        ]

    def _create_aliens(self) -> list[Alien]:
        origin_x, origin_y = ALIEN_ORIGIN
        aliens = []
        for row in range(ALIEN_ROWS):
            kind = _alien_kind(row)
            width, height = self.alien_sizes[kind]
            for col in range(ALIEN_COLUMNS):
                aliens.append(
                    Alien(
                        kind,
                        float(origin_x + col * ALIEN_SPACING),
                        float(origin_y + row * ALIEN_SPACING),
                        width,
                        height,
                    )
                )
        return aliens

    def _new_spawn_interval(self) -> int:
        return self.rng.randint(*SPAWN_INTERVAL_RANGE)

    def _init_game(self) -> None:
        self.obstacles = self._create_obstacles()
        self.aliens = self._create_aliens()
        self.alien_direction = 1
        self.time_last_alien_fired = 0.0
        self.time_last_spawn = 0.0
        self.run = True
        self.mystery_spawn_interval = self._new_spawn_interval()
        self.mystery_ship.spawn(self.screen_width, self.rng.randint(0, 1))
        self.high_score = self.store.load()

    def _reset(self) -> None:
        self.spaceship.reset()
        self.aliens.clear()
        self.alien_lasers.clear()
        self.obstacles.clear()
        self.lives = START_LIVES

    def _reset_for_next_level(self) -> None:
        self.aliens.clear()
        self.alien_lasers.clear()
        self.obstacles.clear()
        self.mystery_ship.alive = False
        self.time_last_spawn = 0.0
        self.mystery_spawn_interval = self._new_spawn_interval()

    # -- per-frame logic -----------------------------------------------

    def handle_input(self, left: bool, right: bool, space: bool, now: float) -> None:
        """Apply one frame of player input; left wins over right, right over fire."""
        if not self.run:
            return
        if left:
            self.spaceship.move_left()
        elif right:
            self.spaceship.move_right()
        elif space:
            if self.spaceship.fire_laser(now) and self._on_laser is not None:
                self._on_laser()

    def update(self, now: float, enter_pressed: bool = False) -> None:
        """Advance the game by one frame at time ``now`` (seconds)."""
        if not self.run:
            if enter_pressed:
                self._reset()
                self._init_game()
            return

        if now - self.time_last_spawn > self.mystery_spawn_interval:
            self.mystery_ship.spawn(self.screen_width, self.rng.randint(0, 1))
            self.time_last_spawn = now
            self.mystery_spawn_interval = self._new_spawn_interval()

        for laser in self.spaceship.lasers:
            laser.update(self.screen_width)
        self._move_aliens()
        self._alien_shoot_laser(now)
        for laser in self.alien_lasers:
            laser.update(self.screen_width)
        self._delete_inactive_lasers()
        self.mystery_ship.update(self.screen_width)
        self._check_for_collisions()

        if not self.aliens:
            self.score += LEVEL_BONUS
            self._check_for_high_score()
            self.level += 1
            self._reset_for_next_level()
            self._init_game()

    def _delete_inactive_lasers(self) -> None:
        self.spaceship.lasers[:] = [l for l in self.spaceship.lasers if l.active]
        self.alien_lasers[:] = [l for l in self.alien_lasers if l.active]

    def _move_aliens(self) -> None:
        for alien in self.aliens:
            if alien.x + alien.width > self.screen_width - ALIEN_MARGIN:
                self.alien_direction = -1
                self._move_down_aliens(ALIEN_DROP)
            if alien.x < ALIEN_MARGIN:
                self.alien_direction = 1
                self._move_down_aliens(ALIEN_DROP)
            alien.update(self.alien_direction)

    def _move_down_aliens(self, distance: int) -> None:
        for alien in self.aliens:
            alien.y += distance

    def _alien_shoot_laser(self, now: float) -> None:
        if now - self.time_last_alien_fired < ALIEN_LASER_INTERVAL or not self.aliens:
            return
        alien = self.aliens[self.rng.randint(0, len(self.aliens) - 1)]
        self.alien_lasers.append(
            Laser(alien.x + alien.width // 2, alien.y + alien.height, ALIEN_LASER_SPEED)
        )
        self.time_last_alien_fired = now

    def _explode(self) -> None:
        if self._on_explosion is not None:
            self._on_explosion()

    def _erase_blocks_hit_by(self, rect) -> bool:
        """Remove every shield block overlapping ``rect``; return whether any was hit."""
        hit = False
        for obstacle in self.obstacles:
            kept = [b for b in obstacle.blocks if not b.rect().collides(rect)]
            if len(kept) != len(obstacle.blocks):
                hit = True
                obstacle.blocks = kept
        return hit

    def _check_for_collisions(self) -> None:
        for laser in self.spaceship.lasers:
            laser_rect = laser.rect()
            survivors = []
            for alien in self.aliens:
                if alien.rect().collides(laser_rect):
                    self._explode()
                    self.score += alien.points
                    self._check_for_high_score()
                    laser.active = False
                else:
                    survivors.append(alien)
            self.aliens = survivors

            if self._erase_blocks_hit_by(laser_rect):
                laser.active = False

            if self.mystery_ship.alive and self.mystery_ship.rect().collides(laser_rect):
                self.mystery_ship.alive = False
                laser.active = False
                self.score += MYSTERY_POINTS
                self._check_for_high_score()
                self._explode()

        for laser in self.alien_lasers:
            laser_rect = laser.rect()
            if laser_rect.collides(self.spaceship.rect()):
                laser.active = False
                self.lives -= 1
                if self.lives == 0:
                    self._game_over()
            if self._erase_blocks_hit_by(laser_rect):
                laser.active = False

        for alien in self.aliens:
            alien_rect = alien.rect()
            self._erase_blocks_hit_by(alien_rect)
            if alien_rect.collides(self.spaceship.rect()):
                self._game_over()

    def _game_over(self) -> None:
        self.run = False
        self.score = 0

    def _check_for_high_score(self) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save(self.high_score)

    # -- drawing -------------------------------------------------------

    def draw(self, surface: pygame.Surface, images: Mapping[str, pygame.Surface]) -> None:
        """Draw the playfield; ``images`` holds "spaceship", "mystery" and "alien_1".."alien_3"."""
        self.spaceship.draw(surface, images["spaceship"])
        for laser in self.spaceship.lasers:
            laser.draw(surface)
        for obstacle in self.obstacles:
            obstacle.draw(surface)
        for alien in self.aliens:
            alien.draw(surface, images[f"alien_{alien.kind}"])
        for laser in self.alien_lasers:
            laser.draw(surface)
        self.mystery_ship.draw(surface, images["mystery"])

        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        text = self._font.render(f"LEVEL: {self.level}", True, LEVEL_TEXT_COLOR)
        surface.blit(text, (350, 15))