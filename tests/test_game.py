import random

import pytest

from invaders.alien import POINTS, Alien
from invaders.game import (
    ALIEN_COLUMNS,
    ALIEN_DROP,
    ALIEN_ROWS,
    LEVEL_BONUS,
    MYSTERY_POINTS,
    OBSTACLE_COUNT,
    START_LIVES,
    Game,
    HighScoreStore,
)
from invaders.laser import Laser
from invaders.spaceship import STEP

SCREEN = 800
ALIEN_SIZE = (40, 40)
SHIP_SIZE = (60, 30)
MYSTERY_SIZE = (60, 30)


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "highscore.txt")


@pytest.fixture
def explosions():
    return []


@pytest.fixture
def game(store, explosions):
    return Game(
        SCREEN,
        SCREEN,
        {1: ALIEN_SIZE, 2: ALIEN_SIZE, 3: ALIEN_SIZE},
        SHIP_SIZE,
        MYSTERY_SIZE,
        store=store,
        rng=random.Random(0),
        on_explosion=lambda: explosions.append(1),
    )


def test_store_round_trip(store):
    store.save(1234)
    assert store.load() == 1234


def test_store_missing_file_is_zero(store):
    assert store.load() == 0


def test_store_garbage_is_zero(store):
    store.path.write_text("not a number")
    assert store.load() == 0


def test_initial_state(game):
    assert len(game.aliens) == ALIEN_ROWS * ALIEN_COLUMNS
    assert len(game.obstacles) == OBSTACLE_COUNT
    assert game.lives == START_LIVES
    assert game.level == 1
    assert game.score == 0
    assert game.run is True
    assert game.mystery_ship.alive is True


def test_alien_layout(game):
    kinds = [a.kind for a in game.aliens]
    assert kinds[:ALIEN_COLUMNS] == [3] * ALIEN_COLUMNS
    assert kinds[ALIEN_COLUMNS : 3 * ALIEN_COLUMNS] == [2] * (2 * ALIEN_COLUMNS)
    assert kinds[3 * ALIEN_COLUMNS :] == [1] * (2 * ALIEN_COLUMNS)
    assert (game.aliens[0].x, game.aliens[0].y) == (75, 110)


def test_obstacles_share_height_and_do_not_overlap(game):
    ys = {o.y for o in game.obstacles}
    assert ys == {SCREEN - 200}
    xs = [o.x for o in game.obstacles]
    assert xs == sorted(xs)


def test_high_score_loaded_on_start(store):
    store.save(777)
    g = Game(SCREEN, SCREEN, {1: ALIEN_SIZE, 2: ALIEN_SIZE, 3: ALIEN_SIZE},
             SHIP_SIZE, MYSTERY_SIZE, store=store, rng=random.Random(1))
    assert g.high_score == 777


def test_input_moves_ship_left(game):
    before = game.spaceship.x
    game.handle_input(True, False, False, 0.0)
    assert game.spaceship.x == before - STEP


def test_input_ignored_when_not_running(game):
    game.run = False
    before = game.spaceship.x
    game.handle_input(True, False, True, 10.0)
    assert game.spaceship.x == before
    assert game.spaceship.lasers == []


def test_fire_calls_laser_sound(store):
    shots = []
    g = Game(SCREEN, SCREEN, {1: ALIEN_SIZE, 2: ALIEN_SIZE, 3: ALIEN_SIZE},
             SHIP_SIZE, MYSTERY_SIZE, store=store, rng=random.Random(2),
             on_laser=lambda: shots.append(1))
    g.handle_input(False, False, True, 1.0)
    g.handle_input(False, False, True, 1.1)
    assert len(g.spaceship.lasers) == 1
    assert shots == [1]


def test_shooting_alien_scores_and_saves(game, store, explosions):
    target = game.aliens[5]
    game.spaceship.lasers.append(Laser(target.x + 10, target.y + 10, -6))
    game.update(0.1)
    assert target not in game.aliens
    assert game.score == POINTS[3]
    assert game.high_score == game.score
    assert store.load() == game.score
    assert explosions == [1]


def test_mystery_ship_hit(game):
    ship = game.mystery_ship
    ship.spawn(SCREEN, 1)
    game.spaceship.lasers.append(Laser(ship.x - 3 + 10, ship.y + 10, -6))
    game.update(0.1)
    assert ship.alive is False
    assert game.score == MYSTERY_POINTS


def test_player_laser_destroys_blocks(game):
    obstacle = game.obstacles[0]
    before = len(obstacle.blocks)
    block = obstacle.blocks[0]
    laser = Laser(block.x, block.y + 6, -6)
    game.spaceship.lasers.append(laser)
    game.update(0.1)
    assert len(obstacle.blocks) < before
    assert laser.active is False


def test_alien_laser_costs_a_life(game):
    ship = game.spaceship
    game.alien_lasers.append(Laser(ship.x + 10, ship.y, 6))
    game.update(0.1)
    assert game.lives == START_LIVES - 1
    assert game.run is True


def test_last_life_ends_game_and_enter_restarts(game):
    game.lives = 1
    game.score = 50
    ship = game.spaceship
    game.alien_lasers.append(Laser(ship.x + 10, ship.y, 6))
    game.update(0.1)
    assert game.run is False
    assert game.score == 0

    game.update(0.2, enter_pressed=False)
    assert game.run is False

    game.update(0.3, enter_pressed=True)
    assert game.run is True
    assert game.lives == START_LIVES
    assert len(game.aliens) == ALIEN_ROWS * ALIEN_COLUMNS
    assert game.alien_lasers == []


def test_clearing_aliens_advances_level(game):
    game.aliens = []
    game.update(0.1)
    assert game.level == 2
    assert game.score == LEVEL_BONUS
    assert len(game.aliens) == ALIEN_ROWS * ALIEN_COLUMNS
    assert len(game.obstacles) == OBSTACLE_COUNT


def test_aliens_turn_at_right_edge(game):
    width, height = ALIEN_SIZE
    alien = Alien(1, float(SCREEN - 25 - width + 5), 300.0, width, height)
    game.aliens = [alien]
    game.update(0.1)
    assert game.alien_direction == -1
    assert alien.y == 300.0 + ALIEN_DROP
    assert alien.x == SCREEN - 25 - width + 4


def test_aliens_fire_after_interval(game):
    game.update(0.1)
    assert game.alien_lasers == []
    game.update(1.0)
    assert len(game.alien_lasers) == 1
    assert game.alien_lasers[0].speed > 0
    assert game.time_last_alien_fired == 1.0


def test_mystery_ship_respawns_after_interval(game):
    game.mystery_ship.alive = False
    game.update(25.0)
    assert game.mystery_ship.alive is True
    assert game.time_last_spawn == 25.0
    assert 10 <= game.mystery_spawn_interval <= 20