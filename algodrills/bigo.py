"""Small functions with different growth rates, used to illustrate Big O."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import cycle, islice, product
from typing import TextIO


def add(a: int, b: int) -> int:
    """Return ``a + b``. Constant time: O(1)."""
    return a + b


def sum_to_max(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` by adding each term: O(N)."""
    total = 0
    for i in range(1, maximum + 1):
        total += i
    return total


def sum_to_max_v2(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` with the closed formula: O(1)."""
    return maximum * (maximum + 1) // 2


def sum_vals(vals: Iterable[int]) -> int:
    """Return the sum of ``vals``: O(N) in the number of values."""
    total = 0
    for val in vals:
        total += val
    return total


def find(values: Sequence[int], x: int) -> int:
    """Return the index of the first ``x`` in ``values``, or -1: O(N)."""
    return next((i for i, val in enumerate(values) if val == x), -1)


def grid(x: int, y: int) -> str:
    """Return ``y`` rows of ``x`` cells alternating ``x`` and ``o``: O(XY).

    The alternation carries on from one row to the next.
    """
    cells = cycle("xo")
    return "".join("".join(islice(cells, max(x, 0))) + "\n" for _ in range(y))


def print_list(word: str, n: int, file: TextIO | None = None) -> None:
    """Write ``n`` lines, each the code points of ``word`` run together: O(N*M)."""
    out = file if file is not None else sys.stdout
    line = "".join(str(ord(char)) for char in word)
    for _ in range(n):
        print(line, file=out)


def cube(n: int) -> str:
    """Return every ``(x, y, z)`` with coordinates below ``n``, one per line: O(N^3)."""
    axis = range(n)
    return "".join(f"({x}, {y}, {z})\n" for x, y, z in product(axis, axis, axis))