"""Modular exponentiation, extended Euclid and factorial digit counts."""

from __future__ import annotations

from math import fsum, log10


def big_mod(base: int, exponent: int, modulus: int) -> int:
    """base ** exponent % modulus by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1 % modulus
    square = base % modulus
    while exponent:
        if exponent & 1:
            result = result * square % modulus
        square = square * square % modulus
        exponent >>= 1
    return result


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """(g, x, y) with a*x + b*y == g, where g is the gcd of a and b.

    Division truncates toward zero, so with negative inputs g may be negative.
    """
    # Each step replaces (a, b) by (b % a, a); coefficients are rebuilt on the way back.
    quotients: list[int] = []
    while a != 0:
        quotient, remainder = _truncating_divmod(b, a)
        quotients.append(quotient)
        a, b = remainder, a
    x, y = 0, 1
    for quotient in reversed(quotients):
        x, y = y - quotient * x, x
    return b, x, y


def factorial_digit_count(n: int) -> int:
    """Number of decimal digits of n!."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return int(fsum(log10(i) for i in range(1, n + 1))) + 1