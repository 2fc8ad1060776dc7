"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from .catalog import list_tetriminos, sort_names
from .display import format_debug
from .settings import OptionError, default_settings, parse_arguments

_DIRECTORY = Path("tetriminos")
_FAILURE = 84


def main(argv: Sequence[str] | None = None) -> int:
    """Read the options and tetriminos, print the debug report if asked."""
    args = list(sys.argv if argv is None else argv)
    program = args[0] if args else "tetris"
    try:
        found = list_tetriminos(_DIRECTORY)
    except OSError:
        return _FAILURE
    names = sort_names(found)
    settings = default_settings()
    settings.tetri_nb = len(found)
    try:
        parse_arguments(args, settings)
    except OptionError as error:
        print(f"{program}: {error}", file=sys.stderr)
        return _FAILURE
    if settings.debug and not settings.help:
        sys.stdout.write(
            "*** DEBUG MODE ***\n"
            + format_debug(names, settings, _DIRECTORY)
            + "Press any key to start Tetris\n"
        )
    return 0