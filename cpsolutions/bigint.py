"""Arbitrary-precision signed integers with truncating division."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

_Operand = Union["BigInt", int]


def _parse(text: str) -> int:
    text = text.strip()
    negative = False
    position = 0
    while position < len(text) and text[position] in "+-":
        if text[position] == "-":
            negative = not negative
        position += 1
    digits = text[position:]
    if digits and not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid integer literal: {text!r}")
    magnitude = int(digits) if digits else 0
    return -magnitude if negative else magnitude


@total_ordering
class BigInt:
    """A signed integer of unbounded size.

    Division truncates toward zero and the remainder takes the sign of the
    dividend.
    """

    __slots__ = ("_value",)

    def __init__(self, value: BigInt | int | str = 0) -> None:
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, bool):
            raise TypeError("BigInt cannot be built from a bool")
        elif isinstance(value, int):
            self._value = value
        elif isinstance(value, str):
            self._value = _parse(value)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInt(other)
        return None

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"

    def __int__(self) -> int:
        return self._value

    def __add__(self, other: _Operand) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value + rhs._value)

    def __radd__(self, other: int) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: _Operand) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value - rhs._value)

    def __rsub__(self, other: int) -> BigInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: _Operand) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value * rhs._value)

    def __rmul__(self, other: int) -> BigInt:
        return self.__mul__(other)

    def __divmod__(self, other: _Operand) -> tuple[BigInt, BigInt]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._value == 0:
            raise ZeroDivisionError("BigInt division by zero")
        quotient = abs(self._value) // abs(rhs._value)
        if (self._value < 0) != (rhs._value < 0):
            quotient = -quotient
        remainder = self._value - quotient * rhs._value
        return BigInt(quotient), BigInt(remainder)

    def __floordiv__(self, other: _Operand) -> BigInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: _Operand) -> BigInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __pow__(self, exponent: _Operand) -> BigInt:
        power = self._coerce(exponent)
        if power is None:
            return NotImplemented
        if power._value < 0:
            raise ValueError("exponent must not be negative")
        result, base, remaining = 1, self._value, power._value
        while remaining:
            if remaining & 1:
                result *= base
            base *= base
            remaining >>= 1
        return BigInt(result)

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs._value

    def __lt__(self, other: _Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def is_zero(self) -> bool:
        """Tell whether the value is zero."""
        return self._value == 0

    def digit_count(self) -> int:
        """Return the number of decimal digits; zero has none."""
        return 0 if self._value == 0 else len(str(abs(self._value)))

    def digit_sum(self) -> int:
        """Return the sum of the decimal digits of the absolute value."""
        return sum(int(char) for char in str(abs(self._value)))


def bigint_gcd(a: BigInt, b: BigInt) -> BigInt:
    """Return the non-negative greatest common divisor of ``a`` and ``b``."""
    a, b = abs(BigInt(a)), abs(BigInt(b))
    while not b.is_zero():
        a, b = b, a % b
    return a


def bigint_lcm(a: BigInt, b: BigInt) -> BigInt:
    """Return ``a / gcd(a, b) * b``; both being zero is a division by zero."""
    a, b = BigInt(a), BigInt(b)
    return a // bigint_gcd(a, b) * b