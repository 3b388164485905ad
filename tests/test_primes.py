from math import prod

import pytest
from hypothesis import given, strategies as st

from cpbook.primes import (
    count_primes_in_range,
    prime_factorization,
    primes_in_range,
    primes_up_to,
    totient,
    totient_table,
)


def test_small_primes():
    assert primes_up_to(32) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


@pytest.mark.parametrize("limit", [-5, 0, 1])
def test_no_primes_below_two(limit):
    assert primes_up_to(limit) == []


@given(st.integers(min_value=2, max_value=3000))
def test_sieve_agrees_with_factorisation(limit):
    primes = set(primes_up_to(limit))
    for n in range(2, limit + 1, max(1, limit // 50)):
        assert (n in primes) == (prime_factorization(n) == [(n, 1)])


@given(st.integers(min_value=-10, max_value=2000), st.integers(min_value=0, max_value=500))
def test_segment_matches_full_sieve(low, width):
    high = low + width
    expected = [p for p in primes_up_to(high) if p >= low]
    assert primes_in_range(low, high) == expected
    assert count_primes_in_range(low, high) == len(expected)


def test_empty_range():
    assert primes_in_range(10, 5) == []
    assert count_primes_in_range(0, 1) == 0


def test_range_near_int32_limit():
    found = primes_in_range(2147483000, 2147483647)
    assert found[-1] == 2147483647
    assert all(prime_factorization(p) == [(p, 1)] for p in found)


def test_largest_int32_is_prime():
    assert prime_factorization(2147483647) == [(2147483647, 1)]


def test_factorisation_order_largest_first():
    assert prime_factorization(2**10 * 3**2 * 7) == [(7, 1), (3, 2), (2, 10)]


def test_factorisation_of_one():
    assert prime_factorization(1) == []


@given(st.integers(min_value=1, max_value=10**9))
def test_factorisation_rebuilds_number(n):
    factors = prime_factorization(n)
    assert prod(p**e for p, e in factors) == n
    primes = [p for p, _ in factors]
    assert primes == sorted(primes, reverse=True)
    assert all(prime_factorization(p) == [(p, 1)] for p in primes)


@pytest.mark.parametrize("n", [0, -4])
def test_factorisation_rejects_non_positive(n):
    with pytest.raises(ValueError):
        prime_factorization(n)


def test_totient_table_matches_totient():
    table = totient_table(2000)
    assert len(table) == 2001
    assert table[0] == 0
    assert all(table[n] == totient(n) for n in range(1, 2001))


@given(st.sampled_from(primes_up_to(5000)))
def test_totient_of_prime(p):
    assert totient(p) == p - 1


@given(st.integers(min_value=1, max_value=300), st.integers(min_value=1, max_value=300))
def test_totient_multiplicative_for_coprime(a, b):
    shared = {p for p, _ in prime_factorization(a)} & {p for p, _ in prime_factorization(b)}
    if not shared:
        assert totient(a * b) == totient(a) * totient(b)
    else:
        assert totient(a * b) > totient(a) * totient(b) or a * b == 1


def test_totient_rejects_non_positive():
    with pytest.raises(ValueError):
        totient(0)
    with pytest.raises(ValueError):
        totient_table(-1)