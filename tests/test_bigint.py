import pytest
from hypothesis import given, strategies as st

from cpbook.bigint import BigInt

numbers = st.integers(min_value=-10**40, max_value=10**40)


def big(n: int) -> BigInt:
    return BigInt(str(n))


@given(numbers)
def test_string_round_trip(n):
    assert str(big(n)) == str(n)
    assert eval_free_repr(big(n)) == str(n)


def eval_free_repr(value: BigInt) -> str:
    text = repr(value)
    assert text.startswith("BigInt('") and text.endswith("')")
    return text[len("BigInt('"):-2]


def test_leading_zeros_and_negative_zero():
    assert str(BigInt("-000")) == "0"
    assert BigInt("-0") == BigInt("0")
    assert len(BigInt("-00123")) == 3


@pytest.mark.parametrize("text", ["", "-", "12a", "+5", "1 2", "--3", "\u00b2"])
def test_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        BigInt(text)


def test_rejects_non_string():
    with pytest.raises(TypeError):
        BigInt(12)


@given(numbers, numbers)
def test_addition(a, b):
    assert big(a) + big(b) == big(a + b)


@given(numbers, numbers)
def test_subtraction(a, b):
    assert big(a) - big(b) == big(a - b)


@given(numbers, numbers)
def test_multiplication(a, b):
    assert big(a) * big(b) == big(a * b)


@given(numbers)
def test_negation(n):
    assert -big(n) == big(-n)
    assert big(n) + (-big(n)) == BigInt("0")


@given(numbers, numbers.filter(lambda n: n != 0))
def test_division_truncates_toward_zero(a, b):
    q = big(a) // big(b)
    r = big(a) % big(b)
    assert q * big(b) + r == big(a)
    r_value = int(str(r))
    assert abs(r_value) < abs(b)
    assert r_value == 0 or (r_value < 0) == (a < 0)


def test_negative_division_example():
    assert str(BigInt("-7") // BigInt("2")) == "-3"
    assert str(BigInt("-7") % BigInt("2")) == "-1"


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInt("5") // BigInt("0")
    with pytest.raises(ZeroDivisionError):
        BigInt("5") % BigInt("-0")


@given(numbers, numbers)
def test_ordering_matches_int(a, b):
    assert (big(a) < big(b)) == (a < b)
    assert (big(a) <= big(b)) == (a <= b)
    assert (big(a) > big(b)) == (a > b)
    assert (big(a) == big(b)) == (a == b)


@given(numbers)
def test_length_counts_digits(n):
    assert len(big(n)) == len(str(abs(n)))


@given(numbers)
def test_hash_consistent_with_equality(n):
    assert hash(big(n)) == hash(BigInt(str(n)))
    assert len({big(n), BigInt(str(n))}) == 1


@given(numbers, st.integers(min_value=-10**6, max_value=10**6))
def test_int_operands_are_accepted(a, b):
    assert big(a) + b == big(a + b)
    assert big(a) * str(b) == big(a * b)


def test_unrelated_operand_rejected():
    with pytest.raises(TypeError):
        BigInt("1") + 1.5
    assert (BigInt("1") == 1) is False