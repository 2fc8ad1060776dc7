import pytest

from tetrispec.text import escape_special, is_numeric, read_lines, split_words


def test_split_words_on_spaces():
    assert split_words("4 2 7", " ") == ["4", "2", "7"]


def test_split_words_collapses_runs():
    assert split_words("a   b", " ") == ["a", "b"]


def test_split_words_stops_at_newline():
    assert split_words("a b\nc d", " ") == ["a", "b"]


def test_split_words_tab_after_separator_is_a_gap():
    assert split_words("x \ty", " ") == ["x", "y"]


def test_split_words_trailing_separator_gives_empty_word():
    assert split_words("1 2 3 ", " ") == ["1", "2", "3", ""]


def test_split_words_other_separator_keeps_spaces_inside():
    words = split_words("a b,c", ",")
    assert words == ["a b", "c"]


@pytest.mark.parametrize(
    "text, expected",
    [("0123", True), ("12a", False), ("", True), ("-1", False), ("9", True)],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


def test_read_lines_drops_final_newline(tmp_path):
    path = tmp_path / "f.tetrimino"
    path.write_text("a\nb\n")
    assert read_lines(path) == ["a", "b"]


def test_read_lines_keeps_empty_lines_and_last_line(tmp_path):
    path = tmp_path / "f.tetrimino"
    path.write_text("a\n\nb")
    assert read_lines(path) == ["a", "", "b"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_text("")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    assert read_lines(tmp_path / "missing") == []


@pytest.mark.parametrize("lines", [["1 1 1", "*"], ["3 2 4", "***", " * "], ["x"]])
def test_read_lines_round_trip(tmp_path, lines):
    path = tmp_path / "shape"
    path.write_text("\n".join(lines) + "\n")
    assert read_lines(path) == lines


def test_escape_special_keeps_printable():
    text = "Hello, World ~!"
    assert escape_special(text) == text


def test_escape_special_tab():
    assert escape_special("\t") == "\\011"


def test_escape_special_delete():
    assert escape_special("\x7f") == "\\177"


def test_escape_special_output_is_printable():
    result = escape_special("a\x01b\nc\x1b")
    assert all(" " <= char <= "~" for char in result)
    assert result.startswith("a\\")