# invaders

A Space Invaders arcade game built on pygame.

Five rows of eleven aliens march across the screen. When one reaches an
edge, the formation turns around and drops down, and every 0.35 seconds
a random alien fires at your ship. Four shields stand between you and
them; shots and aliens that touch a shield chip pieces away. A mystery
ship flies across the top of the screen every 10 to 20 seconds.

## Installing

```
pip install .
```

## Playing

```
invaders
```

The window is 800 by 800 pixels. Run the command from a directory that
holds the game's assets:

- `Graphics/` with `spaceship.png`, `mystery.png`, `alien_1.png`,
  `alien_2.png` and `alien_3.png`
- `Sounds/` with `music.ogg`, `explosion.ogg` and `laser.ogg`
- `Font/monogram.ttf` (if it cannot be loaded, pygame's default font is
  used instead)

The high score is kept in `highscore.txt` in that same directory. If the
file cannot be read or written, a message is printed to standard error
and the high score starts from 0.

### Controls

| Key         | Action                      |
|-------------|-----------------------------|
| Left arrow  | Move left                   |
| Right arrow | Move right                  |
| Space       | Fire                        |
| Enter       | Start again after game over |
| Escape      | Quit                        |

Only one action is taken per frame: left wins over right, and moving
wins over firing. Your ship fires at most once every 0.35 seconds.

### Scoring

| Target                  | Points |
|-------------------------|--------|
| Alien, bottom two rows  | 100    |
| Alien, middle two rows  | 200    |
| Alien, top row          | 300    |
| Mystery ship            | 500    |
| Clearing a wave         | 1000   |

You start with three lives. When you clear a wave, the next level begins
and your score and lives carry over. The game ends when you run out of
lives or an alien reaches your ship; the score then drops to 0, and
pressing Enter starts a new game with three lives.

## Using the game logic

`invaders.game.Game` holds the whole game state and needs no window or
images: it is given the screen size and the sprite sizes.

```python
from invaders.game import Game, HighScoreStore

game = Game(
    800, 800,
    alien_sizes={1: (48, 32), 2: (44, 32), 3: (32, 32)},
    spaceship_size=(60, 32),
    mystery_size=(64, 28),
    store=HighScoreStore("scores.txt"),
)
game.handle_input(left=False, right=False, space=True, now=1.0)
game.update(now=1.0)
print(game.score, game.lives, game.level, game.run)
```

- `Game.handle_input(left, right, space, now)` applies one frame of input.
- `Game.update(now, enter_pressed=False)` advances one frame; `now` is in
  seconds.
- `Game.draw(surface, images)` draws the playfield onto a pygame surface;
  `images` maps `"spaceship"`, `"mystery"` and `"alien_1"` to `"alien_3"`
  to surfaces.
- Optional `rng` (a `random.Random`) makes the game repeatable, and
  `on_explosion` and `on_laser` are called when a sound should play.
- `HighScoreStore(path)` reads and writes the high score with `load()`
  and `save(score)`.

The pieces of the playfield live in their own modules: `invaders.alien`,
`invaders.spaceship`, `invaders.laser`, `invaders.obstacle`,
`invaders.mysteryship` and `invaders.block` (which also has the `Rect`
used for collision checks).

## Development

```
pip install -e ".[test]"
pytest
```