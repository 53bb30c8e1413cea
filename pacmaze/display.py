"""Drawing the level with pygame and running the main loop."""

import time

import pygame

from .errors import ErrorCode, PacManError
from .game import Key, Outcome

TILE = 20
WINDOW_TITLE = "pacmaze"

WALL_COLOR = (33, 33, 222)
FLOOR_COLOR = (0, 0, 0)
COIN_COLOR = (255, 184, 151)
PLAYER_COLOR = (255, 255, 0)
GHOST_COLOR = (255, 0, 0)
DOOR_COLOR = (0, 200, 0)
SCORE_BACKGROUND = (40, 40, 40)
SCORE_TEXT = (255, 255, 255)

_SCORE_ORIGIN = (14 * TILE, 0)
_SCORE_TEXT_ORIGIN = (15 * TILE - 5, TILE)

_PYGAME_KEYS = {
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_p: Key.SPEED_UP,
    pygame.K_m: Key.SLOW_DOWN,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def key_from_pygame(key):
    """Translate a pygame key code into a game key, or ``None`` if unused."""
    return _PYGAME_KEYS.get(key)


class Renderer:
    """A window showing one game, one tile per cell."""

    def __init__(self, game):
        self.game = game
        try:
            pygame.display.init()
            pygame.font.init()
            self.screen = pygame.display.set_mode(
                (game.width * TILE, game.height * TILE)
            )
        except pygame.error as exc:
            pygame.quit()
            raise PacManError(ErrorCode.GRAPHICS) from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = pygame.font.Font(None, TILE)
        self._open = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def tile_color(self, tile):
        """Colour used to draw a map cell; the exit shows only once it is open."""
        if tile == "1":
            return WALL_COLOR
        if tile == "C":
            return COIN_COLOR
        if tile == "P":
            return PLAYER_COLOR
        if tile in ("M", "m"):
            return GHOST_COLOR
        if tile == "E":
            return DOOR_COLOR if self.game.finished else FLOOR_COLOR
        return FLOOR_COLOR

    def _fill_cell(self, x, y, color):
        self.screen.fill(color, pygame.Rect(x * TILE, y * TILE, TILE, TILE))

    def draw(self):
        """Paint the grid, the enemy and the score, then show the frame."""
        for y, row in enumerate(self.game.grid):
            for x, cell in enumerate(row):
                self._fill_cell(x, y, self.tile_color(cell))
        ex, ey = self.game.enemy_sprite
        self._fill_cell(ex, ey, self.tile_color("M"))
        self.screen.fill(SCORE_BACKGROUND, pygame.Rect(*_SCORE_ORIGIN, TILE, TILE))
        score = self.font.render(str(self.game.wallet), True, SCORE_TEXT)
        self.screen.blit(score, _SCORE_TEXT_ORIGIN)
        pygame.display.flip()

    def close(self):
        """Close the window; further calls do nothing."""
        if self._open:
            self._open = False
            pygame.quit()


def _handle_events(game):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            game.handle_key(Key.ESCAPE)
        elif event.type == pygame.KEYDOWN:
            key = key_from_pygame(event.key)
            if key is not None:
                game.handle_key(key)


def run(game):
    """Play the game in a window until it ends; return the final outcome."""
    with Renderer(game) as renderer:
        renderer.draw()
        while game.over is None:
            _handle_events(game)
            if game.over is None:
                game.tick()
            renderer.draw()
            if game.over is None:
                time.sleep(game.frame_delay)
    return game.over if game.over is not None else Outcome.QUIT