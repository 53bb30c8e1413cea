"""Error codes and messages reported by the game."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Reasons the game can refuse to start."""

    USAGE = 1
    EXTENSION = 2
    PATH = 3
    SHAPE = 4
    CHARACTER = 5
    WALLS = 6
    COMPONENTS = 7
    PATHS = 8
    MEMORY = 9
    GRAPHICS = 10
    IMAGE = 11


_MESSAGES = {
    ErrorCode.USAGE: "usage: \033[0;32mpacmaze pathmap.ber",
    ErrorCode.EXTENSION: "the file should be in this form: name.ber",
    ErrorCode.PATH: "\033[0;31mmap path not valid",
    ErrorCode.SHAPE: "the map should be rectangle and not empty",
    ErrorCode.CHARACTER: "there is undefined character",
    ErrorCode.WALLS: "the map should tourned by 1 as wall",
    ErrorCode.COMPONENTS: (
        "the map should contain :\none player P, one enemy M "
        "one exit door E and at least one collectible C"
    ),
    ErrorCode.PATHS: (
        "the player P should have a way between him and "
        "the the collectables and the exit door"
    ),
    ErrorCode.MEMORY: "malloc failed",
    ErrorCode.GRAPHICS: "mlx failed",
    ErrorCode.IMAGE: "an image path is invalide",
}


def error_message(code):
    """Return the user-facing message for an error code."""
    return _MESSAGES[ErrorCode(code)]


class PacManError(Exception):
    """Raised when a map or the game setup is rejected."""

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(error_message(self.code))