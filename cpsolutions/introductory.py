"""Solutions to a set of introductory combinatorics and number problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

MOD = 1_000_000_007


class NoSolutionError(ValueError):
    """Raised when a problem instance has no valid answer."""


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence n, f(n), ... ending at 1 (halve if even, else 3n+1)."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the smallest number in 1..n that does not appear in ``numbers``."""
    seen = set(numbers)
    for candidate in range(1, n + 1):
        if candidate not in seen:
            return candidate
    raise ValueError("no number in the range is missing")


def longest_repetition(s: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not s:
        raise ValueError("string must not be empty")
    best = current = 1
    for previous, char in zip(s, s[1:]):
        if char == previous:
            current += 1
        else:
            best = max(best, current)
            current = 1
    return max(best, current)


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the minimum total increments making ``values`` non-decreasing."""
    iterator = iter(values)
    try:
        highest = next(iterator)
    except StopIteration:
        return 0
    total = 0
    for value in iterator:
        if value >= highest:
            highest = value
        else:
            total += highest - value
    return total


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n in which adjacent numbers never differ by 1."""
    if n in (2, 3):
        raise NoSolutionError("no beautiful permutation exists")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def number_spiral(row: int, col: int) -> int:
    """Return the value at (row, col) of the infinite number spiral."""
    layer = max(row - 1, col - 1)
    if layer % 2 == 0:
        if layer == row - 1:
            return layer * layer + col
        return (layer + 1) * (layer + 1) - (row - 1)
    if layer == row - 1:
        return (layer + 1) * (layer + 1) - (col - 1)
    return layer * layer + row


def two_knights(n: int) -> list[int]:
    """For k = 1..n, count placements of two non-attacking knights on a k x k board."""
    return [
        (k * k) * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2) if k > 1 else 0
        for k in range(1, n + 1)
    ]


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum, largest numbers placed first."""
    total = n * (n + 1) // 2
    if total % 2 == 1:
        raise NoSolutionError("numbers 1..n cannot be split into equal halves")
    remaining = total // 2
    first: list[int] = []
    second: list[int] = []
    for value in range(n, 0, -1):
        if value <= remaining:
            first.append(value)
            remaining -= value
        else:
            second.append(value)
    return first, second


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length n, modulo 10**9 + 7."""
    return pow(2, max(n, 0), MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    count = 0
    power = 5
    while n // power >= 1:
        count += n // power
        power *= 5
    return count


def coin_piles(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by removing 1 and 2 coins per move."""
    if a > 2 * b or b > 2 * a:
        return False
    return (a + b) % 3 == 0


def palindrome_reorder(s: str) -> str:
    """Rearrange the characters of ``s`` into a palindrome."""
    counts = Counter(s)
    odd = [char for char, count in counts.items() if count % 2 == 1]
    if len(odd) > 1:
        raise NoSolutionError("characters cannot form a palindrome")
    half = "".join(
        char * (counts[char] // 2) for char in sorted(counts) if counts[char] % 2 == 0
    )
    middle = odd[0] * counts[odd[0]] if odd else ""
    return half + middle + half[::-1]


def _permutations_in_order(chars: list[str]) -> Iterator[str]:
    """Yield every distinct arrangement of ``chars`` in lexicographic order."""
    chars = sorted(chars)
    while True:
        yield "".join(chars)
        pivot = len(chars) - 2
        while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
            pivot -= 1
        if pivot < 0:
            return
        successor = len(chars) - 1
        while chars[successor] <= chars[pivot]:
            successor -= 1
        chars[pivot], chars[successor] = chars[successor], chars[pivot]
        chars[pivot + 1:] = reversed(chars[pivot + 1:])


def creating_strings(s: str) -> list[str]:
    """Return all distinct strings formed from the characters of ``s``, sorted."""
    return list(_permutations_in_order(list(s)))


def apple_division(weights: Sequence[int]) -> int:
    """Return the minimal difference between the weights of two groups."""
    if not weights:
        raise ValueError("at least one weight is required")
    total = sum(weights)
    sums = {0}
    for weight in weights[1:]:
        sums |= {partial + weight for partial in sums}
    return min(abs(total - 2 * partial) for partial in sums)


def gray_code(n: int) -> list[str]:
    """Return the n-bit reflected Gray code as bit strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry n discs from peg 1 to peg 3."""
    moves: list[tuple[int, int]] = []

    def tower(count: int, source: int, target: int, spare: int) -> None:
        if count == 0:
            return
        tower(count - 1, source, spare, target)
        moves.append((source, target))
        tower(count - 1, spare, target, source)

    tower(n, 1, 3, 2)
    return moves