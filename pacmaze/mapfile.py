"""Reading and validating ``.ber`` map files."""

import re
from collections import Counter
from dataclasses import dataclass
from itertools import chain

from .errors import ErrorCode, PacManError

TILES = frozenset("01PCEM")
WALKABLE = frozenset("P0CEM")
_LINE_END = re.compile(r"[\n\0]")


@dataclass
class LoadedMap:
    """A validated map; the enemy's start cell is already cleared to floor."""

    rows: list
    player: tuple
    enemy: tuple
    stars: int

    @property
    def width(self):
        return len(self.rows[0])

    @property
    def height(self):
        return len(self.rows)


def has_ber_extension(path):
    """Tell whether the text after the first dot starts with ``ber``."""
    if path.startswith("."):
        return False
    dot = path.find(".")
    return dot != -1 and path[dot + 1:].startswith("ber")


def measure_map(text):
    """Return ``(width, height)`` of a rectangular map made of known tiles."""
    width = None
    height = 0
    bad_character = False
    for line in _LINE_END.split(text):
        height += 1
        if width is not None and len(line) != width:
            raise PacManError(ErrorCode.SHAPE)
        width = len(line)
        if not set(line) <= TILES:
            bad_character = True
    if bad_character:
        raise PacManError(ErrorCode.CHARACTER)
    if not width:
        raise PacManError(ErrorCode.SHAPE)
    return width, height


def _positions(rows, tile):
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == tile:
                yield x, y


def check_walls(rows):
    """Raise unless the map is enclosed by walls."""
    enclosed = (
        all(cell == "1" for cell in rows[0])
        and all(cell == "1" for cell in rows[-1])
        and all(row[0] == "1" and row[-1] == "1" for row in rows)
    )
    if not enclosed:
        raise PacManError(ErrorCode.WALLS)


def count_components(rows):
    """Check for one player, enemy and exit; return the number of collectibles."""
    counts = Counter(chain.from_iterable(rows))
    if counts["P"] != 1 or counts["M"] != 1 or counts["C"] == 0 or counts["E"] != 1:
        raise PacManError(ErrorCode.COMPONENTS)
    return counts["C"]


def flood_fill(rows, start):
    """Return a copy of the map with every cell reachable from ``start`` set to ``F``."""
    filled = [list(row) for row in rows]
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(filled) and 0 <= x < len(filled[y])):
            continue
        if filled[y][x] not in WALKABLE:
            continue
        filled[y][x] = "F"
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return filled


def check_paths(rows, start):
    """Raise unless every collectible and the exit are reachable from ``start``."""
    filled = flood_fill(rows, start)
    if any(cell in ("C", "E") for cell in chain.from_iterable(filled)):
        raise PacManError(ErrorCode.PATHS)


def parse_map(text):
    """Validate map text and return the level it describes."""
    measure_map(text)
    rows = [list(line) for line in _LINE_END.split(text)]
    check_walls(rows)
    stars = count_components(rows)
    *_, player = _positions(rows, "P")
    enemy = next(_positions(rows, "M"))
    rows[enemy[1]][enemy[0]] = "0"
    check_paths(rows, player)
    return LoadedMap(rows=rows, player=player, enemy=enemy, stars=stars)


def load_map(path):
    """Read and validate the map stored at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise PacManError(ErrorCode.PATH) from exc
    return parse_map(text)