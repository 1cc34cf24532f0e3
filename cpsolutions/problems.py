"""Counting, grid and greedy problems over small inputs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

LUCKY_DIVISORS = (4, 7, 44, 47, 77, 74, 444, 447, 474, 744, 774, 747, 777)


def distinct_numbers(values: Iterable[int]) -> int:
    """Return how many different values occur in ``values``."""
    return len(set(values))


def counting_rooms(grid: Sequence[str]) -> int:
    """Count the rooms of a map where ``#`` is wall and ``.`` is floor.

    A room is a set of cells connected horizontally or vertically that are
    not walls; a room is counted only when it holds at least one ``.``.
    """
    rows = [str(row) for row in grid]
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for r, line in enumerate(rows):
        for c, cell in enumerate(line):
            if cell != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                i, j = stack.pop()
                for ni, nj in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
                    if not (0 <= ni < len(rows) and 0 <= nj < len(rows[ni])):
                        continue
                    if rows[ni][nj] == "#" or (ni, nj) in seen:
                        continue
                    seen.add((ni, nj))
                    stack.append((ni, nj))
    return rooms


def is_lucky(n: int) -> bool:
    """Tell whether every decimal digit of ``n`` is 4 or 7."""
    if n < 0:
        return False
    while n:
        n, digit = divmod(n, 10)
        if digit not in (4, 7):
            return False
    return True


def lucky_division(n: int) -> bool:
    """Tell whether ``n`` is lucky or divisible by a lucky number up to 777."""
    return is_lucky(n) or any(n % divisor == 0 for divisor in LUCKY_DIVISORS)


def twins_coins(values: Iterable[int]) -> int:
    """Return the fewest coins whose sum is strictly more than the rest."""
    coins = sorted(values, reverse=True)
    if not coins:
        raise ValueError("at least one coin is required")
    total = sum(coins)
    taken = 0
    for count, coin in enumerate(coins, 1):
        taken += coin
        if taken > total - taken:
            return count
    return len(coins)