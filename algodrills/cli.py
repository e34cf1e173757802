"""Command that reads pairs of integers and prints their GCDs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from algodrills.numbers import gcd


def _tokens(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count then that many ``a b`` pairs from stdin; print each GCD.

    Values missing from the input are taken as 0.
    """
    parser = argparse.ArgumentParser(
        prog="algodrills",
        description="Read N, then N pairs of integers, and print the GCD of each pair.",
    )
    parser.parse_args(argv)

    try:
        numbers = list(_tokens(sys.stdin.read()))
    except ValueError as exc:
        print(f"algodrills: invalid input: {exc}", file=sys.stderr)
        return 1

    values = iter(numbers)
    count = next(values, 0)
    for _ in range(count):
        a = next(values, 0)
        b = next(values, 0)
        print(gcd(a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())