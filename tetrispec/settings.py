"""Game settings and command-line option handling."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from .tetrimino import _atoi

# Cursor key sequences of the xterm-256color terminal description.
_KEY_LEFT = "\x1bOD"
_KEY_RIGHT = "\x1bOC"
_KEY_UP = "\x1bOA"
_KEY_DOWN = "\x1bOB"

_SHORT_OPTIONS = "LlrtdqpwD-"

_KEY_ATTRIBUTES = {
    "l": "left",
    "r": "right",
    "t": "turn",
    "d": "drop",
    "q": "quit",
    "p": "pause",
}

_HELP_LINES = (
    "Options:",
    " --help               Display this help",
    " -L --level={num}     Start Tetris at level num (def: 1)",
    " -l --key-left={K}    Move the tetrimino LEFT using the K "
    "key (def: left arrow)",
    " -r --key-right={K}   Move the tetrimino RIGHT using the K"
    "key (def: right arrow)",
    " -t --key-turn={K}    TURN the tetrimino clockwise 90d using"
    "the K key (def: toparrow)",
    " -d --key-drop={K}    DROP the tetrimino using the K key "
    "(def: down arrow)",
    " -q --key-quit={K}    QUIT the game using the K key"
    "(def: ‘q’ key)",
    " -p --key-pause={K}   PAUSE/RESTART the game using the K key"
    "(def: space bar)",
    " --map-size={row,col} Set the numbers of rows and columns of"
    "the map (def: 20,10)",
    " -w --without-next    Hide next tetrimino (def: false)",
    " -D --debug           Debug mode (def: false)",
)


class OptionError(ValueError):
    """Raised when the command line holds an invalid option."""


class _LongOption(NamedTuple):
    name: str
    takes_value: bool
    code: str


_LONG_OPTIONS = (
    _LongOption("debug", False, "D"),
    _LongOption("help", False, ","),
    _LongOption("whithout-next", False, "w"),
    _LongOption("level=", True, "L"),
    _LongOption("key-right=", True, "r"),
    _LongOption("key-turn=", True, "t"),
    _LongOption("key-drop=", True, "d"),
    _LongOption("key-quit=", True, "q"),
    _LongOption("key-pause=", True, "p"),
    _LongOption("map-size=", True, "/"),
)


@dataclass
class Settings:
    """Key bindings and game options."""

    left: str = _KEY_LEFT
    right: str = _KEY_RIGHT
    turn: str = _KEY_UP
    drop: str = _KEY_DOWN
    quit: str = "q"
    pause: str = " "
    show_next: bool = True
    level: int = 1
    x: int = 20
    y: int = 10
    tetri_nb: int = 0
    debug: bool = False
    help: bool = False

    def set_map_size(self, value: str) -> None:
        """Take the map size from the first and third characters of ``value``."""
        if len(value) < 3:
            raise OptionError(f"invalid map size: {value!r}")
        self.x = ord(value[0]) - ord("0")
        self.y = ord(value[2]) - ord("0")


def default_settings() -> Settings:
    """Return the settings used when no option is given."""
    return Settings()


def help_text(program: str) -> str:
    """Return the usage message for ``program``."""
    return f"Usage:  {program} [options]\n" + "".join(
        f"{line}\n" for line in _HELP_LINES
    )


def _apply(
    code: str,
    optarg: str | None,
    next_arg: str | None,
    settings: Settings,
    program: str,
) -> None:
    def value() -> str:
        if optarg is not None:
            return optarg
        if next_arg is None:
            raise OptionError(f"option -- '{code}' requires a value")
        return next_arg

    if code in _KEY_ATTRIBUTES:
        setattr(settings, _KEY_ATTRIBUTES[code], value())
    elif code == "L":
        settings.level = _atoi(value())
    elif code == "/":
        settings.set_map_size(value())
    elif code == "D":
        settings.debug = True
    elif code == "w":
        settings.show_next = False
    elif code == ",":
        settings.help = True
        print(help_text(program), end="")
    else:
        raise OptionError(f"unsupported option -- '{code}'")


def _find_long(name: str) -> _LongOption:
    matches = [option for option in _LONG_OPTIONS if option.name.startswith(name)]
    exact = [option for option in matches if option.name == name]
    if exact:
        return exact[0]
    if not matches:
        raise OptionError(f"unrecognized option '--{name}'")
    if len(matches) > 1:
        raise OptionError(f"option '--{name}' is ambiguous")
    return matches[0]


def _parse_long(args: list[str], index: int, settings: Settings, program: str) -> int:
    name, has_value, inline = args[index][2:].partition("=")
    option = _find_long(name)
    index += 1
    optarg: str | None = None
    if option.takes_value:
        if has_value:
            optarg = inline
        elif index < len(args):
            optarg = args[index]
            index += 1
        else:
            raise OptionError(f"option '--{option.name}' requires an argument")
    elif has_value:
        raise OptionError(f"option '--{option.name}' doesn't allow an argument")
    _apply(option.code, optarg, None, settings, program)
    return index


def _parse_short(args: list[str], index: int, settings: Settings, program: str) -> None:
    letters = args[index][1:]
    for position, letter in enumerate(letters, 1):
        if letter not in _SHORT_OPTIONS:
            raise OptionError(f"invalid option -- '{letter}'")
        # A value is read from the next argument only once the cluster ends;
        # it is not consumed, so it is still scanned for options.
        following = index + 1 if position == len(letters) else index
        next_arg = args[following] if following < len(args) else None
        _apply(letter, None, next_arg, settings, program)


def parse_arguments(argv: Sequence[str], settings: Settings) -> Settings:
    """Apply the options of ``argv`` (program name first) to ``settings``.

    ``--help`` prints the usage message as it is met. Raises OptionError
    on an unknown, ambiguous or incomplete option.
    """
    args = list(argv)
    program = args[0] if args else "tetris"
    index = 1
    while index < len(args):
        arg = args[index]
        if arg == "--":
            break
        if arg.startswith("--"):
            index = _parse_long(args, index, settings, program)
        elif arg.startswith("-") and len(arg) > 1:
            _parse_short(args, index, settings, program)
            index += 1
        else:
            index += 1
    return settings