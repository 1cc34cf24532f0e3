# cpsolutions

Solutions to well-known introductory competitive-programming problems,
a few number-theory helpers and a signed arbitrary-precision integer type
with truncating division.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cpsolutions.introductory` – the introductory problem set:
  `weird_algorithm` (the sequence that halves even numbers and maps odd `n`
  to `3n + 1`, ending at 1), `missing_number`, `longest_repetition`,
  `increasing_array_moves`, `beautiful_permutation`, `number_spiral`,
  `two_knights`, `two_sets`, `bit_strings`, `trailing_zeros`, `coin_piles`,
  `palindrome_reorder`, `creating_strings`, `apple_division`, `gray_code` and
  `hanoi_moves`. Problems without an answer for the given input
  (`beautiful_permutation`, `two_sets`, `palindrome_reorder`) raise
  `NoSolutionError`, a subclass of `ValueError`; other invalid inputs raise
  `ValueError`.
- `cpsolutions.problems` – `distinct_numbers`, `counting_rooms` (connected
  floor areas in a grid of `.` and `#`), `is_lucky`, `lucky_division` and
  `twins_coins`.
- `cpsolutions.numtheory` – `mod_pow` (modular exponentiation by repeated
  squaring, modulus 10⁹ + 7 by default), `prime_factors` and `gcd`.
- `cpsolutions.bigint` – the `BigInt` class, built from an `int`, a string
  of digits (with optional leading signs) or another `BigInt`. It supports
  `+`, `-`, `*`, `//`, `%`, `divmod`, `**`, negation, `abs`, comparisons and
  hashing, mixed freely with `int`. Division truncates toward zero and the
  remainder takes the sign of the dividend. It also has `is_zero`,
  `digit_count` and `digit_sum`; `bigint_gcd` and `bigint_lcm` work on it.

## Using the library

```python
from cpsolutions.introductory import bit_strings, trailing_zeros, hanoi_moves
from cpsolutions.numtheory import mod_pow, gcd
from cpsolutions.bigint import BigInt

bit_strings(3)                      # 8, counted modulo 10**9 + 7
trailing_zeros(20)                  # 4 trailing zeros in 20!
hanoi_moves(2)                      # [(1, 2), (1, 3), (2, 3)]
mod_pow(3, 4)                       # 81
gcd(12, 18)                         # 6

big = BigInt("123456789012345678901234567890")
print(big + 1)                      # 123456789012345678901234567891
print(big.digit_count())            # 30
print(divmod(BigInt(-7), 2))        # (BigInt('-3'), BigInt('-1'))
```

## Command line

The package installs a `cpsolutions` command. It takes the name of a
problem, reads that problem's input as whitespace-separated tokens from
standard input and writes the answer to standard output:

```
echo 3 | cpsolutions weird-algorithm
```

prints `3 10 5 16 8 4 2 1`.

The problems are `apple-division`, `bit-strings`, `coin-piles`,
`counting-rooms`, `creating-strings`, `distinct-numbers`, `exponentiation`,
`gray-code`, `hanoi`, `increasing-array`, `lucky-division`, `missing-number`,
`number-spiral`, `palindrome-reorder`, `permutations`, `repetitions`,
`trailing-zeros`, `twins`, `two-knights`, `two-sets` and `weird-algorithm`.
Where a problem has no answer the command prints `NO SOLUTION` (`NO` for
`two-sets`). Malformed or short input is reported on standard error with
exit status 1. List the problems with:

```
cpsolutions --help
```