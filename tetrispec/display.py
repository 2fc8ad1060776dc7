"""Text shown in debug mode."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .settings import Settings
from .tetrimino import InvalidTetrimino, check_tetrimino, tetrimino_name
from .text import read_lines


def format_key(key: str) -> str:
    """Return a readable form of a key binding."""
    if key and ord(key[0]) >= 128:
        kept = "".join(char for char in key if 0 < ord(char) < 128)
        if len(key.encode("utf-8")) == 3:
            kept += "(space)"
        return kept
    pieces = []
    for char in key:
        if char == "\x1b":
            pieces.append("^E")
        elif char == " ":
            pieces.append("(space)")
        else:
            pieces.append(char)
    return "".join(pieces)


def format_settings(settings: Settings) -> str:
    """Return the key bindings and the next-piece option."""
    lines = [
        f"Key Left : {format_key(settings.left)}",
        f"Key Right : {format_key(settings.right)}",
        f"Key Turn : {format_key(settings.turn)}",
        f"Key Drop : {format_key(settings.drop)}",
        f"Key Quit : {format_key(settings.quit)}",
        f"Key Pause : {format_key(settings.pause)}",
        "Next : " + ("Yes" if settings.show_next else "No"),
    ]
    return "\n".join(lines) + "\n"


def format_tetrimino(directory: str | os.PathLike[str], filename: str) -> str:
    """Describe one tetrimino file, or report it as an error."""
    lines = read_lines(Path(directory) / filename)
    name = tetrimino_name(filename) or ""
    head = f"Tetriminos : Name {name} : "
    try:
        header = check_tetrimino(lines)
    except InvalidTetrimino:
        return head + "Error\n"
    size = f"Size {header.width}*{header.height} : Color {header.color} :\n"
    return head + size + "".join(f"{row}\n" for row in lines[1:])


def format_debug(
    names: Iterable[str],
    settings: Settings,
    directory: str | os.PathLike[str],
) -> str:
    """Return the whole debug report for the settings and tetriminos."""
    parts = [
        format_settings(settings),
        f"Level : {settings.level}\n",
        f"Size : {settings.x}*{settings.y}\n",
        f"Tetriminos : {settings.tetri_nb}\n",
    ]
    parts.extend(format_tetrimino(directory, name) for name in names)
    return "".join(parts)