"""Validation of tetrimino descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Sequence

from .text import is_numeric, split_words


class InvalidTetrimino(ValueError):
    """Raised when a tetrimino description is malformed."""


@dataclass(frozen=True)
class Header:
    """Width, height and color from the first line of a tetrimino file."""

    width: int
    height: int
    color: int


def _atoi(text: str) -> int:
    """Parse a leading integer the way the C library does, 0 if none."""
    text = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for char in text:
        if not "0" <= char <= "9":
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_header(line: str) -> Header:
    """Read width, height and color from a header line."""
    parts = line.split(" ", 2)
    if len(parts) < 3:
        raise InvalidTetrimino(f"header needs three fields: {line!r}")
    return Header(_atoi(parts[0]), _atoi(parts[1]), _atoi(parts[2]))


def check_chars(row: str) -> bool:
    """Return True when the row holds only '*' and spaces."""
    return all(char in "* " for char in row)


def shape_width(row: str) -> int:
    """Return the span from the first to the last '*' of a row."""
    start = row.find("*")
    if start < 0:
        start = 0
    end = row.rfind("*")
    if end < 1:
        end = 0
    return end - start + 1


def max_width(rows: Sequence[str], width: int) -> int:
    """Return the largest of ``width`` and the widths of all rows but the first."""
    return max([width, *(shape_width(row) for row in rows[1:])])


def analyse_header(line: str) -> None:
    """Check that a header holds three positive numbers with a color of 1 to 8."""
    words = split_words(line, " ")
    if len(words) != 3:
        raise InvalidTetrimino(f"header needs three fields: {line!r}")
    if not all(is_numeric(word) for word in words):
        raise InvalidTetrimino(f"header fields must be numbers: {line!r}")
    width, height, color = (_atoi(word) for word in words)
    if not 1 <= color <= 8:
        raise InvalidTetrimino(f"color out of range: {color}")
    if width < 1 or height < 1:
        raise InvalidTetrimino(f"size must be positive: {width}*{height}")


def analyse_shape(rows: Sequence[str], line: str) -> None:
    """Check the shape rows against the size declared in the header."""
    words = split_words(line, " ")
    width = _atoi(words[0])
    height = _atoi(words[1])
    if len(rows) != height:
        raise InvalidTetrimino(f"expected {height} rows, found {len(rows)}")
    if max_width(rows, width) != width:
        raise InvalidTetrimino(f"shape is wider than {width}")
    for row in rows:
        if not check_chars(row):
            raise InvalidTetrimino(f"invalid character in row {row!r}")


def check_tetrimino(lines: Sequence[str]) -> Header:
    """Validate a whole tetrimino file and return its header."""
    if not lines:
        raise InvalidTetrimino("empty tetrimino")
    first = lines[0]
    analyse_header(first)
    analyse_shape(lines[1:], first)
    return parse_header(first)


def tetrimino_name(filename: str) -> str | None:
    """Return the file name up to its '.t' extension, or None without one."""
    start = 1 if filename.startswith(".") else 0
    for index in range(start, len(filename)):
        if filename[index] == "." and filename[index + 1 : index + 2] == "t":
            return filename[:index]
    return None