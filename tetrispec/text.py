"""String helpers used when reading tetrimino files."""

from __future__ import annotations

import os

_GAP_CHARS = (" ", "\t")


def split_words(text: str, separator: str) -> list[str]:
    """Split the first line of ``text`` into words.

    A word runs until ``separator`` or the end of the line. Words are
    separated by runs of ``separator``, spaces and tabs. A trailing run
    of separators yields a final empty word.
    """
    line = text.split("\n", 1)[0]
    gaps = set(_GAP_CHARS) | {separator}
    words: list[str] = []
    pos = 0
    length = len(line)
    while pos < length:
        if line[pos] in gaps:
            while pos < length and line[pos] in gaps:
                pos += 1
        start = pos
        while pos < length and line[pos] != separator:
            pos += 1
        words.append(line[start:pos])
    return words


def is_numeric(text: str) -> bool:
    """Return True when every character of ``text`` is a decimal digit."""
    return all("0" <= char <= "9" for char in text)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file without their line terminators.

    A final newline does not produce an extra empty line. A file that
    cannot be opened yields no lines.
    """
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            content = handle.read()
    except OSError:
        return []
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def escape_special(text: str) -> str:
    """Replace non-printable characters by a backslash and three octal digits."""
    pieces: list[str] = []
    for char in text:
        if " " <= char <= "~":
            pieces.append(char)
        else:
            pieces.extend(f"\\{byte:03o}" for byte in char.encode("utf-8"))
    return "".join(pieces)