# algodrills

Small algorithm drills in plain Python: number base conversion, prime
factoring, Fibonacci, GCD, list and string exercises, functions that
illustrate Big O growth rates, and hand-written bubble and insertion
sorts. There are no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Numbers (`algodrills.numbers`)

```python
from algodrills.numbers import base_to_dec, dec_to_base, base_to_base, factor, fibonacci, gcd

base_to_dec("E", 16)          # 14
dec_to_base(14, 2)            # "1110"
base_to_base("E", 16, 2)      # "1110"
factor([2, 3, 5], 28)         # [2, 2, 7]
fibonacci(14)                 # 377
gcd(30, 9)                    # 3
```

- Digits are `0`-`9` and upper-case `A`-`F`. `base_to_dec` raises
  `ValueError` for any other character.
- `dec_to_base` accepts bases 2 to 16 and raises `ValueError` outside
  that range. Zero and negative values give an empty string.
- `factor(primes, number)` divides each prime out as often as it goes,
  in the order given; a remainder other than 1 is appended as if it were
  prime. It raises `ValueError` if a prime is below 2, or if asked to
  factor zero with a non-empty list of primes.
- `fibonacci(n)` uses F(0) = 0 and F(1) = 1; values of `n` at or below 1
  are returned unchanged.

## Lists and strings (`algodrills.lists`)

```python
from algodrills.lists import find_two_that_sum, num_in_list, sum_numbers, reverse, fizz_buzz

find_two_that_sum([1, 2, 3, 4], 7)   # (2, 3)
find_two_that_sum([0, 1, 1], 0)      # (-1, -1)
num_in_list([1, 2, 3], 2)            # True
sum_numbers([1, 2, 3, 4, 5])         # 15
reverse("日本語")                     # "語本日"
fizz_buzz(5)                         # "1, 2, Fizz, 4, Buzz"
```

`find_two_that_sum` returns the first pair of distinct indices it finds
and never changes the input. `fizz_buzz` writes multiples of 15 as
`Fizz Buzz`. `print_fizz_buzz(n, file=None)` writes the same line and a
newline to `file`, or to standard output.

## Big O examples (`algodrills.bigo`)

Functions used to show different growth rates:

- `add(a, b)` — O(1)
- `sum_to_max(maximum)` — 1 + ... + maximum by a loop, O(N)
- `sum_to_max_v2(maximum)` — the same by the closed formula, O(1)
- `sum_vals(vals)` — O(N)
- `find(values, x)` — index of the first `x`, or -1, O(N)
- `grid(x, y)` — `y` rows of `x` cells alternating `x` and `o`, the
  alternation carrying over between rows, O(XY)
- `print_list(word, n, file=None)` — writes `n` lines, each the code
  points of `word` run together, O(N*M)
- `cube(n)` — every `(x, y, z)` below `n`, one per line, O(N^3)

```python
from algodrills.bigo import grid
print(grid(3, 3), end="")
# xox
# oxo
# xox
```

## Sorting (`algodrills.sorting`, `algodrills.person`)

All sorts work in place on a mutable sequence.

```python
from algodrills.person import Person
from algodrills.sorting import bubble_sort_int, insertion_sort_person

values = [3, 1, 2]
bubble_sort_int(values)       # values is now [1, 2, 3]

people = [Person(45, "Johnny", "Testuser"), Person(12, "Billy", "Tables")]
insertion_sort_person(people) # by age, then last name, then first name
```

- `bubble_sort(items, key=None)` stops as soon as a sweep makes no swap.
- `insertion_sort(items, key=None)` keeps equal items in their original
  order.
- `bubble_sort_int`, `bubble_sort_string`, `bubble_sort_person`,
  `insertion_sort_int`, `insertion_sort_string` and
  `insertion_sort_person` are the typed shortcuts.

`Person` is a frozen dataclass with `age`, `first_name` and `last_name`;
`Person.sort_key()` returns `(age, last_name, first_name)`.

## Command line

`algodrills-gcd` reads a count `n` from standard input followed by `n`
pairs of integers, and prints the greatest common divisor of each pair,
one per line:

```
$ printf '2\n30 9\n100 25\n' | algodrills-gcd
3
25
```

Values missing from the input are taken as 0. Input that is not an
integer is reported on standard error and the command exits with
status 1.