"""List and string drills: searching, summing, reversing and FizzBuzz."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

NOT_FOUND = (-1, -1)


def find_two_that_sum(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Return the indices of two distinct entries of ``numbers`` adding to ``target``.

    The first match found is returned, scanning the first index in
    order and, for each, every other index in order. ``(-1, -1)`` is
    returned when no pair exists. ``numbers`` is never modified.
    """
    for i, first in enumerate(numbers):
        for j, second in enumerate(numbers):
            if i != j and first + second == target:
                return i, j
    return NOT_FOUND


def num_in_list(values: Iterable[int], num: int) -> bool:
    """Return whether ``num`` occurs in ``values``."""
    return any(value == num for value in values)


def sum_numbers(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``; an empty input sums to 0."""
    return sum(numbers, 0)


def reverse(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    return word[::-1]


def _fizz_buzz_term(i: int) -> str:
    if i % 15 == 0:
        return "Fizz Buzz"
    if i % 3 == 0:
        return "Fizz"
    if i % 5 == 0:
        return "Buzz"
    return str(i)


def fizz_buzz(n: int) -> str:
    """Return the FizzBuzz terms from 1 to ``n`` joined by ``", "``.

    Multiples of 3 become ``Fizz``, of 5 ``Buzz``, of both ``Fizz Buzz``.
    """
    return ", ".join(_fizz_buzz_term(i) for i in range(1, n + 1))


def print_fizz_buzz(n: int, file: TextIO | None = None) -> None:
    """Write the FizzBuzz line for ``n`` followed by a newline."""
    print(fizz_buzz(n), file=file if file is not None else sys.stdout)