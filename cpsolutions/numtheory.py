"""Modular exponentiation, prime factorisation and greatest common divisors."""

from __future__ import annotations

MOD = 1_000_000_007


def mod_pow(base: int, exponent: int, modulus: int = MOD) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus`` by repeated squaring."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    base %= modulus
    if base == 0:
        return 0
    result = 1
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def prime_factors(number: int) -> list[int]:
    """Return the prime factors of ``number`` in ascending order, with repeats."""
    factors: list[int] = []
    if number < 2:
        return factors
    while number % 2 == 0:
        factors.append(2)
        number //= 2
    divisor = 3
    while divisor * divisor <= number:
        while number % divisor == 0:
            factors.append(divisor)
            number //= divisor
        divisor += 2
    if number > 2:
        factors.append(number)
    return factors


def gcd(first: int, second: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    if first < 0 or second < 0:
        raise ValueError("arguments must not be negative")
    while second:
        first, second = second, first % second
    return first