# pacmaze

A small Pac-Man style maze game drawn with pygame. You guide the player
around a walled map and pick up every collectible. A ghost patrols back and
forth along its row. Once the exit door opens, you leave through it.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

```
pacmaze path/to/level.ber
```

The command takes exactly one argument, the path of a map file. The map
name must contain a dot followed by `ber`, and the path must not start with
a dot.

### Controls

| Key        | Action                     |
|------------|----------------------------|
| Arrow keys | Step and set the direction |
| `p`        | Speed up                   |
| `m`        | Slow down                  |
| Escape     | Quit                       |

Closing the window also quits.

An arrow key moves the player one step at once. The player then keeps moving
that way every frame until you choose a new direction. A move into a wall
leaves the player where it is and keeps the previous direction.

Each collectible picked up adds one to the score. The score is drawn near
the top of the window, from the fifteenth column on.

### How a game ends

- Stepping onto the open exit prints `success`.
- Running into the ghost, or being caught by it, prints `died`.
- Quitting prints nothing.

In all three cases the command exits with status 0.

## Map format

A map is a rectangle of characters, one row per line:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | Wall                       |
| `0`  | Empty floor                |
| `P`  | Player start (exactly one) |
| `M`  | Ghost start (exactly one)  |
| `E`  | Exit door (exactly one)    |
| `C`  | Collectible (at least one) |

A map is accepted only if all of these hold:

- Every row has the same width.
- The whole border is walls.
- From its start, the player can reach every collectible and the exit.

The exit is drawn as floor until every collectible has been picked up, and
it only ends the game once it is open.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1000000M00001
1111111111111
```

If the arguments or the map are rejected, the program prints `ERROR` and the
reason on standard error, and exits with status 1. If the window cannot be
opened, it prints only the reason, and also exits with status 1.

## Graphics

Every cell is drawn as a plain coloured square of 20 by 20 pixels. The game
uses no image files and plays no sound.

## Using it as a library

```python
from pacmaze.mapfile import load_map
from pacmaze.game import Game, Direction, Key, Outcome

level = load_map("level.ber")   # LoadedMap: rows, player, enemy, stars
game = Game(level)

outcome = game.move(Direction.RIGHT)   # an Outcome, e.g. Outcome.MOVED
game.handle_key(Key.SLOW_DOWN)
result = game.tick()   # moves the player, then the ghost
```

### `pacmaze.mapfile`

- `load_map(path)` reads and validates a map file.
- `parse_map(text)` does the same for map text you already hold.
- The individual checks are also available: `measure_map`, `check_walls`,
  `count_components`, `flood_fill`, `check_paths` and `has_ber_extension`.

### `pacmaze.game`

A `Game` exposes its state directly:

- `grid`, `player`, `enemy`, `wallet`, `moves`, `finished`, `speed`
- `over`, which holds the final `Outcome` once the game has ended
- `frame_delay`, the pause in seconds between frames

### `pacmaze.display`

- `run(game)` opens a window and plays until the game ends, then returns
  the final `Outcome`.
- `Renderer` draws a game.
- `key_from_pygame` maps pygame key codes to `Key` values.

### `pacmaze.errors`

Invalid maps raise `pacmaze.errors.PacManError`, whose `code` is an
`ErrorCode`. `error_message(code)` returns the text for a code.