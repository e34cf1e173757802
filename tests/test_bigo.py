import io
import random

import pytest

from algodrills.bigo import (
    add,
    cube,
    find,
    grid,
    print_list,
    sum_to_max,
    sum_to_max_v2,
    sum_vals,
)


@pytest.mark.parametrize("a, b, want", [(1, 2, 3), (10, 20, 30), (-5, 6, 1)])
def test_add(a, b, want):
    assert add(a, b) == want


@pytest.mark.parametrize("fn", [sum_to_max, sum_to_max_v2])
@pytest.mark.parametrize("n, want", [(1, 1), (5, 15), (8, 36), (100, 5050)])
def test_sum_to_max(fn, n, want):
    assert fn(n) == want


@pytest.mark.parametrize("n", [0, 1, 7, 250])
def test_sum_to_max_versions_agree(n):
    assert sum_to_max(n) == sum_to_max_v2(n)


def test_sum_vals_permutation():
    vals = list(range(100))
    random.Random(7).shuffle(vals)
    assert sum_vals(vals) == 4950


@pytest.mark.parametrize(
    "vals, want",
    [
        ([1, 2, 3], 6),
        ([10, -2, 23, -19], 12),
        ([1, 2, 3, 4, 5, 6, 7, 8], 36),
        ([], 0),
    ],
)
def test_sum_vals(vals, want):
    assert sum_vals(vals) == want


def test_find_returns_first_index():
    assert find([4, 7, 9, 7], 7) == 1


def test_find_missing():
    assert find([1, 2, 3], 5) == -1


def test_find_empty():
    assert find([], 0) == -1


@pytest.mark.parametrize(
    "x, y, want",
    [
        (2, 2, "xo\nxo\n"),
        (3, 3, "xox\noxo\nxox\n"),
        (
            5,
            10,
            "xoxox\noxoxo\nxoxox\noxoxo\nxoxox\noxoxo\nxoxox\noxoxo\nxoxox\noxoxo\n",
        ),
    ],
)
def test_grid(x, y, want):
    assert grid(x, y) == want


def test_grid_no_rows():
    assert grid(4, 0) == ""


@pytest.mark.parametrize(
    "n, want",
    [
        (1, "(0, 0, 0)\n"),
        (
            2,
            "(0, 0, 0)\n(0, 0, 1)\n(0, 1, 0)\n(0, 1, 1)\n"
            "(1, 0, 0)\n(1, 0, 1)\n(1, 1, 0)\n(1, 1, 1)\n",
        ),
        (
            3,
            "(0, 0, 0)\n(0, 0, 1)\n(0, 0, 2)\n(0, 1, 0)\n(0, 1, 1)\n(0, 1, 2)\n"
            "(0, 2, 0)\n(0, 2, 1)\n(0, 2, 2)\n(1, 0, 0)\n(1, 0, 1)\n(1, 0, 2)\n"
            "(1, 1, 0)\n(1, 1, 1)\n(1, 1, 2)\n(1, 2, 0)\n(1, 2, 1)\n(1, 2, 2)\n"
            "(2, 0, 0)\n(2, 0, 1)\n(2, 0, 2)\n(2, 1, 0)\n(2, 1, 1)\n(2, 1, 2)\n"
            "(2, 2, 0)\n(2, 2, 1)\n(2, 2, 2)\n",
        ),
    ],
)
def test_cube(n, want):
    assert cube(n) == want


def test_print_list_writes_code_points():
    buf = io.StringIO()
    print_list("ab", 2, buf)
    assert buf.getvalue() == "9798\n9798\n"


def test_print_list_zero_lines():
    buf = io.StringIO()
    print_list("abc", 0, buf)
    assert buf.getvalue() == ""


def test_print_list_defaults_to_stdout(capsys):
    print_list("A", 1)
    assert capsys.readouterr().out == "65\n"