import itertools

import pytest

from tetrispec.catalog import list_tetriminos, sort_names


def test_list_tetriminos_filters_by_extension(tmp_path):
    wanted = ["square.tetrimino", "bar.tetrimino", "x.tetrimino.bak"]
    for name in wanted + ["readme.txt", "tetrimino"]:
        (tmp_path / name).write_text("1 1 1\n*\n")
    assert sorted(list_tetriminos(tmp_path)) == sorted(wanted)


def test_list_tetriminos_empty_directory(tmp_path):
    assert list_tetriminos(tmp_path) == []


def test_list_tetriminos_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_tetriminos(tmp_path / "missing")


def test_sort_names_classes():
    assert sort_names(["b", "A", "1"]) == ["1", "A", "b"]


def test_sort_names_is_stable_on_first_character():
    assert sort_names(["bz", "ba", "a"]) == ["a", "bz", "ba"]


def test_sort_names_drops_other_first_characters():
    assert sort_names(["_x", "a", ".hidden", ""]) == ["a"]


def test_sort_names_independent_of_input_order():
    names = ["zeta", "Alpha", "7up", "beta"]
    results = {tuple(sort_names(perm)) for perm in itertools.permutations(names)}
    assert len(results) == 1
    assert sorted(results.pop()) == sorted(names)


def test_sort_names_uppercase_before_lowercase():
    result = sort_names(["a", "Z"])
    assert result.index("Z") < result.index("a")