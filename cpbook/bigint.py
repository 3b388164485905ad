"""Arbitrary-size signed decimal integers stored as digit sequences."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

_DIGITS = frozenset("0123456789")

# Magnitudes are tuples of decimal digits, least significant first.
_Magnitude = tuple


def _strip(digits: list[int]) -> list[int]:
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits or [0]


def _compare(a: _Magnitude, b: _Magnitude) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add(a: _Magnitude, b: _Magnitude) -> list[int]:
    result: list[int] = []
    carry = 0
    for i in range(max(len(a), len(b))):
        carry += (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
        carry, digit = divmod(carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result


def _subtract(a: _Magnitude, b: _Magnitude) -> list[int]:
    """a - b for magnitudes with a >= b."""
    result: list[int] = []
    borrow = 0
    for i, digit in enumerate(a):
        value = digit - borrow - (b[i] if i < len(b) else 0)
        borrow = 1 if value < 0 else 0
        result.append(value + 10 * borrow)
    return _strip(result)


def _multiply(a: _Magnitude, b: _Magnitude) -> list[int]:
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        carry = 0
        for j, y in enumerate(b):
            carry += result[i + j] + x * y
            carry, result[i + j] = divmod(carry, 10)
        k = i + len(b)
        while carry:
            carry += result[k]
            carry, result[k] = divmod(carry, 10)
            k += 1
    return _strip(result)


def _divmod(a: _Magnitude, b: _Magnitude) -> tuple[list[int], list[int]]:
    """Long division of magnitudes; b must be non-zero."""
    quotient = [0] * len(a)
    remainder: list[int] = [0]
    for i in reversed(range(len(a))):
        remainder = _strip([a[i], *remainder])
        while _compare(tuple(remainder), b) >= 0:
            remainder = _subtract(tuple(remainder), b)
            quotient[i] += 1
    return _strip(quotient), remainder


def _coerce(value: object) -> Union["BigInt", None]:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt(str(value))
    if isinstance(value, str):
        return BigInt(value)
    return None


@total_ordering
class BigInt:
    """A signed integer of any size held as decimal digits.

    Division and remainder truncate toward zero: the remainder takes the
    sign of the dividend.
    """

    __slots__ = ("_sign", "_digits")

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("BigInt is built from a string of digits")
        negative = text.startswith("-")
        body = text[1:] if negative else text
        if not body or not set(body) <= _DIGITS:
            raise ValueError(f"not a decimal integer: {text!r}")
        self._set(-1 if negative else 1, [int(ch) for ch in reversed(body)])

    def _set(self, sign: int, digits: list[int]) -> None:
        digits = _strip(list(digits))
        self._digits: _Magnitude = tuple(digits)
        self._sign = 1 if digits == [0] else sign

    @classmethod
    def _build(cls, sign: int, digits: list[int]) -> "BigInt":
        obj = cls.__new__(cls)
        obj._set(sign, digits)
        return obj

    def __len__(self) -> int:
        return len(self._digits)

    def __neg__(self) -> "BigInt":
        return self._build(-self._sign, list(self._digits))

    def __add__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if self._sign == rhs._sign:
            return self._build(self._sign, _add(self._digits, rhs._digits))
        if _compare(self._digits, rhs._digits) >= 0:
            return self._build(self._sign, _subtract(self._digits, rhs._digits))
        return self._build(rhs._sign, _subtract(rhs._digits, self._digits))

    def __sub__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __mul__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._build(self._sign * rhs._sign, _multiply(self._digits, rhs._digits))

    def _divide(self, other: object) -> Union[tuple[list[int], list[int], "BigInt"], None]:
        rhs = _coerce(other)
        if rhs is None:
            return None
        if rhs._digits == (0,):
            raise ZeroDivisionError("BigInt division by zero")
        quotient, remainder = _divmod(self._digits, rhs._digits)
        return quotient, remainder, rhs

    def __floordiv__(self, other: object) -> "BigInt":
        parts = self._divide(other)
        if parts is None:
            return NotImplemented
        quotient, _, rhs = parts
        return self._build(self._sign * rhs._sign, quotient)

    def __mod__(self, other: object) -> "BigInt":
        parts = self._divide(other)
        if parts is None:
            return NotImplemented
        _, remainder, _ = parts
        return self._build(self._sign, remainder)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        if self._sign != other._sign:
            return self._sign < other._sign
        order = _compare(self._digits, other._digits)
        return order < 0 if self._sign == 1 else order > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self._sign == other._sign and self._digits == other._digits

    def __hash__(self) -> int:
        return hash((self._sign, self._digits))

    def __str__(self) -> str:
        body = "".join(str(d) for d in reversed(self._digits))
        return "-" + body if self._sign < 0 else body

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"