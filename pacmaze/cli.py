"""Command-line entry point."""

import sys

from .display import run
from .errors import ErrorCode, PacManError, error_message
from .game import Game, Outcome
from .mapfile import has_ber_extension, load_map

_RESULTS = {Outcome.WON: "success", Outcome.DIED: "died"}


def _report(code, *, prefix=True):
    if prefix:
        print("ERROR", file=sys.stderr)
    print(error_message(code), file=sys.stderr)
    return 1


def main(argv=None):
    """Load the map named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _report(ErrorCode.USAGE)
    path = args[0]
    if path.startswith("."):
        return _report(ErrorCode.USAGE)
    if not has_ber_extension(path):
        return _report(ErrorCode.EXTENSION)
    try:
        level = load_map(path)
    except PacManError as exc:
        return _report(exc.code)
    try:
        outcome = run(Game(level))
    except PacManError as exc:
        return _report(exc.code, prefix=False)
    message = _RESULTS.get(outcome)
    if message:
        print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())