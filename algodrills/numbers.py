"""Number drills: base conversion, factoring, Fibonacci and GCD."""

from __future__ import annotations

from collections.abc import Iterable

DIGITS = "0123456789ABCDEF"
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def base_to_dec(value: str, base: int) -> int:
    """Return the integer that ``value`` represents in ``base``.

    Digits are taken from ``0-9`` and upper-case ``A-F``; any other
    character raises ``ValueError``.
    """
    result = 0
    for char in value:
        digit = DIGITS.find(char)
        if digit < 0:
            raise ValueError(f"invalid digit {char!r} in {value!r}")
        result = result * base + digit
    return result


def dec_to_base(dec: int, base: int) -> str:
    """Return ``dec`` written in ``base`` (2 to 16).

    Values that are zero or negative give an empty string.
    """
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    digits: list[str] = []
    while dec > 0:
        dec, rem = divmod(dec, base)
        digits.append(DIGITS[rem])
    return "".join(reversed(digits))


def base_to_base(value: str, base: int, new_base: int) -> str:
    """Convert ``value`` from ``base`` to ``new_base``."""
    return dec_to_base(base_to_dec(value, base), new_base)


def factor(primes: Iterable[int], number: int) -> list[int]:
    """Factor ``number`` using ``primes``.

    Each prime is divided out as often as it goes; a remainder other
    than 1 is appended as if it were prime.
    """
    primes = list(primes)
    if any(prime < 2 for prime in primes):
        raise ValueError("every prime must be at least 2")
    if number == 0 and primes:
        raise ValueError("cannot factor zero")
    result: list[int] = []
    for prime in primes:
        while number % prime == 0:
            result.append(prime)
            number //= prime
    if number > 1:
        result.append(number)
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    while b != 0:
        a, b = b, a % b
    return a