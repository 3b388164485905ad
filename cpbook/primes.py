"""Prime sieves, segmented sieves, factorisation and Euler's totient."""

from __future__ import annotations

from math import isqrt


def _sieve(limit: int) -> bytearray:
    """flags[i] is 1 exactly when i is prime, for 0 <= i <= limit."""
    flags = bytearray([1]) * (limit + 1)
    flags[0:2] = b"\x00\x00"[: min(2, limit + 1)]
    for p in range(2, isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return flags


def primes_up_to(limit: int) -> list[int]:
    """All primes p with p <= limit, in increasing order."""
    if limit < 2:
        return []
    return [n for n, is_prime in enumerate(_sieve(limit)) if is_prime]


def primes_in_range(low: int, high: int) -> list[int]:
    """All primes in the closed interval [low, high], using a segmented sieve.

    Only the interval itself is held in memory, together with the primes up
    to the square root of ``high``.
    """
    low = max(low, 2)
    if high < low:
        return []
    segment = bytearray([1]) * (high - low + 1)
    for p in primes_up_to(isqrt(high)):
        first = max(p * p, -(-low // p) * p)
        if first > high:
            continue
        offset = first - low
        segment[offset::p] = bytes(len(range(offset, len(segment), p)))
    return [low + i for i, is_prime in enumerate(segment) if is_prime]


def count_primes_in_range(low: int, high: int) -> int:
    """Number of primes in the closed interval [low, high]."""
    return len(primes_in_range(low, high))


def prime_factorization(n: int) -> list[tuple[int, int]]:
    """Prime factors of n as (prime, exponent) pairs, largest prime first."""
    if n < 1:
        raise ValueError("only positive integers can be factorised")
    factors: list[tuple[int, int]] = []
    candidate = 2
    while candidate * candidate <= n:
        if n % candidate == 0:
            exponent = 0
            while n % candidate == 0:
                n //= candidate
                exponent += 1
            factors.append((candidate, exponent))
        candidate += 1 if candidate == 2 else 2
    if n != 1:
        factors.append((n, 1))
    factors.reverse()
    return factors


def totient(n: int) -> int:
    """Euler's totient of n by trial division."""
    if n < 1:
        raise ValueError("totient is defined for positive integers only")
    result = n
    if n % 2 == 0:
        result //= 2
        while n % 2 == 0:
            n //= 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            while n % divisor == 0:
                n //= divisor
            result = result * (divisor - 1) // divisor
        divisor += 2
    if n > 1:
        result = result * (n - 1) // n
    return result


def totient_table(limit: int) -> list[int]:
    """table[i] is Euler's totient of i for 1 <= i <= limit; table[0] is 0."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    table = list(range(limit + 1))
    done = bytearray(limit + 1)
    for p in range(2, limit + 1):
        if done[p]:
            continue
        for multiple in range(p, limit + 1, p):
            done[multiple] = 1
            table[multiple] = table[multiple] * (p - 1) // p
    return table