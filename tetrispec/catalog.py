"""Discovery and ordering of tetrimino files."""

from __future__ import annotations

import os
import string
from collections.abc import Iterable

_EXTENSION = ".tetrimino"
_ORDER = {char: rank for rank, char in enumerate(
    string.digits + string.ascii_uppercase + string.ascii_lowercase
)}


def list_tetriminos(directory: str | os.PathLike[str]) -> list[str]:
    """Return the directory entries whose name contains '.tetrimino'.

    Raises OSError when the directory cannot be read.
    """
    return [name for name in os.listdir(directory) if _EXTENSION in name]


def sort_names(names: Iterable[str]) -> list[str]:
    """Order names by first character: digits, upper case, then lower case.

    Names sharing a first character keep their order; names starting
    with any other character are dropped.
    """
    kept = [name for name in names if name and name[0] in _ORDER]
    return sorted(kept, key=lambda name: _ORDER[name[0]])