"""Game state: player moves, the patrolling enemy and key handling."""

from enum import Enum, IntEnum

SLEEP_LOOP = 200_000
SPEED_STEP = 10_000


class Direction(IntEnum):
    """Direction the player is heading in."""

    NONE = 0
    RIGHT = 1
    LEFT = 2
    UP = 3
    DOWN = 4

    @property
    def delta(self):
        return _DELTAS[self]


_DELTAS = {
    Direction.NONE: (0, 0),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class Outcome(Enum):
    """Result of a move or of a key press."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "success"
    DIED = "died"
    QUIT = "quit"


class Key(Enum):
    """Keys the game reacts to."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    SPEED_UP = "speed_up"
    SLOW_DOWN = "slow_down"
    ESCAPE = "escape"


_KEY_DIRECTIONS = {
    Key.RIGHT: Direction.RIGHT,
    Key.LEFT: Direction.LEFT,
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
}

_TERMINAL = frozenset({Outcome.WON, Outcome.DIED, Outcome.QUIT})


class Game:
    """A running level. Delays are in microseconds."""

    def __init__(self, level):
        self.grid = [list(row) for row in level.rows]
        self.stars = level.stars
        self.player = level.player
        self.enemy = level.enemy
        self.enemy_sprite = level.enemy
        self.enemy_moving_right = True
        self.sleep_loop = SLEEP_LOOP
        self.speed = SLEEP_LOOP
        self.direction = Direction.NONE
        self.finished = False
        self.moves = 0
        self.wallet = 0
        self.over = None

    @property
    def width(self):
        return len(self.grid[0])

    @property
    def height(self):
        return len(self.grid)

    @property
    def frame_delay(self):
        """Seconds one animation frame waits in total."""
        return (self.speed + self.speed // 10) / 1_000_000

    def find_player(self):
        """Locate the player on the grid and remember the position."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell == "P":
                    self.player = (x, y)
        return self.player

    def _enter(self, x, y, tx, ty):
        target = self.grid[ty][tx]
        if target == "C":
            self.wallet += 1
            if self.wallet == self.stars:
                self.finished = True
            self.grid[ty][tx] = target = "0"
        if target == "1":
            return Outcome.BLOCKED
        if target == "E" and self.finished:
            return Outcome.WON
        if target == "M":
            return Outcome.DIED
        self.grid[y][x], self.grid[ty][tx] = target, self.grid[y][x]
        return Outcome.MOVED

    def move(self, direction):
        """Try one step; a blocked step keeps the previous heading."""
        direction = Direction(direction)
        if direction is Direction.NONE:
            raise ValueError("a move needs a direction")
        previous = self.direction
        self.direction = direction
        x, y = self.find_player()
        dx, dy = direction.delta
        outcome = self._enter(x, y, x + dx, y + dy)
        if outcome is Outcome.BLOCKED:
            self.direction = previous
            return outcome
        if outcome in _TERMINAL:
            self.over = outcome
            return outcome
        self.moves += 1
        return outcome

    def step_player(self):
        """Keep the player going in its current direction, if any."""
        if self.direction is Direction.NONE:
            return None
        return self.move(self.direction)

    def step_enemy(self):
        """Advance the enemy one cell along its row; return DIED on contact."""
        step = 1 if self.enemy_moving_right else -1
        x, y = self.enemy
        new_x = x + step
        # The enemy position advances even into a blocking cell; it turns back next frame.
        self.enemy = (new_x, y)
        target = self.grid[y][new_x]
        if target == "P" or self.enemy == self.player:
            self.over = Outcome.DIED
            return Outcome.DIED
        if target in ("1", "E"):
            self.enemy_moving_right = not self.enemy_moving_right
        else:
            self.enemy_sprite = (new_x, y)
        return None

    def handle_key(self, key):
        """React to a key press."""
        if self.over is not None:
            return self.over
        key = Key(key)
        if key in _KEY_DIRECTIONS:
            return self.move(_KEY_DIRECTIONS[key])
        if key is Key.SPEED_UP:
            if self.speed - SPEED_STEP > self.sleep_loop / 4:
                self.speed -= SPEED_STEP
        elif key is Key.SLOW_DOWN:
            if self.speed < 2 * self.sleep_loop:
                self.speed += SPEED_STEP
        elif key is Key.ESCAPE:
            self.over = Outcome.QUIT
            return Outcome.QUIT
        return None

    def tick(self):
        """Run one animation frame; return the final outcome once the game ends."""
        if self.over is not None:
            return self.over
        outcome = self.step_player()
        if outcome in _TERMINAL:
            return outcome
        return self.step_enemy()