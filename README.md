# gravwell

A small top-down 2D space arcade game. You fly a ship through a parallax
starfield, near a black hole whose gravity pulls on you, while an enemy ship
turns and thrusts towards you and a cloud of darts hangs in space.

## Installing

```
pip install .
```

This installs the game and its one runtime dependency, `pygame`.

## Playing

```
gravwell
```

Options:

| Option            | Default  | Meaning                                   |
|-------------------|----------|-------------------------------------------|
| `--width`         | `1280`   | window width                              |
| `--height`        | `720`    | window height                             |
| `--assets`        | `assets` | directory that holds the `sprites/` folder |
| `--fps`           | `60`     | frame rate cap                            |

Controls:

| Key                      | Action                    |
|--------------------------|---------------------------|
| Left arrow / `A`         | Rotate anticlockwise      |
| Right arrow / `D`        | Rotate clockwise          |
| Up arrow                 | Thrust forward            |
| Down arrow               | Thrust backward           |
| Space                    | Fire the twin blasters    |
| Escape                   | Quit                      |

The camera follows your ship only once it leaves a dead zone that covers the
middle 60% of the window. The black hole pulls on every moving object that
has mass: your ship, the enemy ship and your own shots. Ships have a top
speed, shots vanish after two seconds, and a trail of exhaust rings fades out
behind you while you thrust forward.

Sprites are loaded from `<assets>/sprites/<name>.png`, where `<assets>` is
the `--assets` directory. The names are the ones `GameSprite.filename()`
returns: `player-ship`, `enemy-ship-1`, `black-hole`, `shot-blue-blaster`,
`exhaust`, `dart`, `stars-sparse` and `stars-large`. When a sprite file is
missing, ships, the black hole, darts, shots and exhaust rings are drawn as
coloured circles instead, and the starfield is not drawn.

## What the game does not do

There is no collision handling: shots pass through ships, and nothing is
ever hit, damaged or destroyed. The enemy ship does not fire. There is no
score, no health, no menu and only one level.

## Using the pieces

The game logic is plain Python and does not need a window. You can drive it
directly:

```python
from gravwell.game import Game
from gravwell.controls import Key

game = Game()
game.resize(1280, 720)
running = game.update(1 / 60, pressed={Key.ARROW_UP}, just_pressed={Key.SPACE})
```

`Game.update` returns `False` once Escape has been pressed.

Some useful building blocks:

- `gravwell.vector.Vec2`: an immutable 2D vector with Euclidean remainder
  (`rem_euclid_scalar`), squared-length clamping
  (`clamp_max_length_squared`) and `Vec2.spiral_spread(n)` for evenly
  spreading objects on a Fermat spiral.
- `gravwell.physics.FacingAngle`: an angle in radians with `angle_diff`,
  `rotate_towards`, `flip`, `rotate` and `to_velocity`.
- `gravwell.background.ParallaxBackground`: works out how many tiles a
  screen needs (`required_tiles`) and where each tile goes for a parallax
  scroll (`get_tile_position`).
- `gravwell.world.World`: the container of entities, with `spawn`,
  `despawn`, `of_kind` and `with_components`.
- `gravwell.level.level1()`: the first level, as `LevelData` that you can
  `spawn` into a `World`.

## Running the tests

```
pip install .[test]
pytest
```