"""Command line entry point: solve one problem from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from cpsolutions.introductory import (
    NoSolutionError,
    apple_division,
    beautiful_permutation,
    bit_strings,
    coin_piles,
    creating_strings,
    gray_code,
    hanoi_moves,
    increasing_array_moves,
    longest_repetition,
    missing_number,
    number_spiral,
    palindrome_reorder,
    trailing_zeros,
    two_knights,
    two_sets,
    weird_algorithm,
)
from cpsolutions.numtheory import mod_pow
from cpsolutions.problems import (
    counting_rooms,
    distinct_numbers,
    lucky_division,
    twins_coins,
)


class _Input:
    """Whitespace-separated tokens read from the problem input."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: Iterator[str] = iter(tokens)

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


def _join(values: Iterable[int]) -> str:
    return " ".join(map(str, values))


def _weird(inp: _Input) -> list[str]:
    return [_join(weird_algorithm(inp.int()))]


def _missing(inp: _Input) -> list[str]:
    n = inp.int()
    return [str(missing_number(n, inp.ints(n - 1)))]


def _repetition(inp: _Input) -> list[str]:
    return [str(longest_repetition(inp.word()))]


def _increasing(inp: _Input) -> list[str]:
    n = inp.int()
    return [str(increasing_array_moves(inp.ints(n)))]


def _permutation(inp: _Input) -> list[str]:
    return [_join(beautiful_permutation(inp.int()))]


def _spiral(inp: _Input) -> list[str]:
    tests = inp.int()
    return [str(number_spiral(inp.int(), inp.int())) for _ in range(tests)]


def _knights(inp: _Input) -> list[str]:
    return [str(count) for count in two_knights(inp.int())]


def _two_sets(inp: _Input) -> list[str]:
    try:
        first, second = two_sets(inp.int())
    except NoSolutionError:
        return ["NO"]
    return ["YES", str(len(first)), _join(first), str(len(second)), _join(second)]


def _bit_strings(inp: _Input) -> list[str]:
    return [str(bit_strings(inp.int()))]


def _trailing(inp: _Input) -> list[str]:
    return [str(trailing_zeros(inp.int()))]


def _coins(inp: _Input) -> list[str]:
    tests = inp.int()
    answers = []
    for _ in range(tests):
        a, b = inp.int(), inp.int()
        answers.append("YES" if coin_piles(a, b) else "NO")
    return answers


def _palindrome(inp: _Input) -> list[str]:
    return [palindrome_reorder(inp.word())]


def _creating(inp: _Input) -> list[str]:
    strings = creating_strings(inp.word())
    return [str(len(strings)), *strings]


def _apples(inp: _Input) -> list[str]:
    n = inp.int()
    return [str(apple_division(inp.ints(n)))]


def _gray(inp: _Input) -> list[str]:
    return gray_code(inp.int())


def _hanoi(inp: _Input) -> list[str]:
    moves = hanoi_moves(inp.int())
    return [str(len(moves)), *(f"{src} {dst}" for src, dst in moves)]


def _exponentiation(inp: _Input) -> list[str]:
    tests = inp.int()
    return [str(mod_pow(inp.int(), inp.int())) for _ in range(tests)]


def _distinct(inp: _Input) -> list[str]:
    n = inp.int()
    return [str(distinct_numbers(inp.ints(n)))]


def _rooms(inp: _Input) -> list[str]:
    rows = inp.int()
    inp.int()
    return [str(counting_rooms([inp.word() for _ in range(rows)]))]


def _lucky(inp: _Input) -> list[str]:
    return ["YES" if lucky_division(inp.int()) else "NO"]


def _twins(inp: _Input) -> list[str]:
    n = inp.int()
    return [str(twins_coins(inp.ints(n)))]


_PROBLEMS: dict[str, Callable[[_Input], list[str]]] = {
    "weird-algorithm": _weird,
    "missing-number": _missing,
    "repetitions": _repetition,
    "increasing-array": _increasing,
    "permutations": _permutation,
    "number-spiral": _spiral,
    "two-knights": _knights,
    "two-sets": _two_sets,
    "bit-strings": _bit_strings,
    "trailing-zeros": _trailing,
    "coin-piles": _coins,
    "palindrome-reorder": _palindrome,
    "creating-strings": _creating,
    "apple-division": _apples,
    "gray-code": _gray,
    "hanoi": _hanoi,
    "exponentiation": _exponentiation,
    "distinct-numbers": _distinct,
    "counting-rooms": _rooms,
    "lucky-division": _lucky,
    "twins": _twins,
}


def main(argv: list[str] | None = None) -> int:
    """Read one problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="cpsolutions",
        description="Solve a problem, reading its input from standard input.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)

    reader = _Input(sys.stdin.read().split())
    try:
        lines = _PROBLEMS[args.problem](reader)
    except NoSolutionError:
        lines = ["NO SOLUTION"]
    except ValueError as exc:
        print(f"cpsolutions: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())