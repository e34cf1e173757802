"""Bubble sort and insertion sort, each sorting a list in place."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

from algodrills.person import Person

T = TypeVar("T")
KeyFunc = Callable[[Any], Any]


def _identity(item: T) -> T:
    return item


def bubble_sort(items: MutableSequence[T], key: KeyFunc | None = None) -> None:
    """Sort ``items`` in place with bubble sort, ordered by ``key``.

    Stops early once a sweep makes no swap. O(N^2).
    """
    key = key or _identity
    size = len(items)
    for sweep in range(size):
        swapped = False
        for i in range(size - 1 - sweep):
            if key(items[i + 1]) < key(items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break


def bubble_sort_int(values: MutableSequence[int]) -> None:
    """Sort a list of integers in place with bubble sort."""
    bubble_sort(values)


def bubble_sort_string(values: MutableSequence[str]) -> None:
    """Sort a list of strings in place with bubble sort."""
    bubble_sort(values)


def bubble_sort_person(people: MutableSequence[Person]) -> None:
    """Sort people in place by age, last name, then first name, with bubble sort."""
    bubble_sort(people, Person.sort_key)


def insertion_sort(items: MutableSequence[T], key: KeyFunc | None = None) -> None:
    """Sort ``items`` in place with insertion sort, ordered by ``key``.

    Each item goes before the first already-placed item it is less
    than, so equal items keep their order. O(N^2).
    """
    key = key or _identity
    placed: list[T] = []
    for item in items:
        item_key = key(item)
        position = next(
            (i for i, other in enumerate(placed) if item_key < key(other)),
            len(placed),
        )
        placed.insert(position, item)
    items[:] = placed


def insertion_sort_int(values: MutableSequence[int]) -> None:
    """Sort a list of integers in place with insertion sort."""
    insertion_sort(values)


def insertion_sort_string(values: MutableSequence[str]) -> None:
    """Sort a list of strings in place with insertion sort."""
    insertion_sort(values)


def insertion_sort_person(people: MutableSequence[Person]) -> None:
    """Sort people in place by age, last name, then first name, with insertion sort."""
    insertion_sort(people, Person.sort_key)