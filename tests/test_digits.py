import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.digits import largest_odd_number, max_diff, min_max_difference


def test_max_diff_worked_example():
    assert max_diff(555) == 888


@pytest.mark.parametrize("digit", range(1, 10))
@pytest.mark.parametrize("length", range(1, 5))
def test_max_diff_of_repeated_digit(digit, length):
    assert max_diff(int(str(digit) * length)) == int("8" * length)


@given(st.integers(min_value=1, max_value=10**9))
def test_max_diff_stays_within_digit_count(n):
    assert 0 <= max_diff(n) < 10 ** len(str(n))


def test_max_diff_rejects_negative():
    with pytest.raises(ValueError):
        max_diff(-5)


def test_min_max_difference_worked_example():
    assert min_max_difference(11891) == 99009


@pytest.mark.parametrize("length", range(1, 6))
def test_min_max_difference_of_all_nines_is_itself(length):
    nines = int("9" * length)
    assert min_max_difference(nines) == nines


@given(st.integers(min_value=0, max_value=10**9))
def test_min_max_difference_stays_within_digit_count(n):
    assert 0 <= min_max_difference(n) < 10 ** len(str(n))


def test_min_max_difference_rejects_negative():
    with pytest.raises(ValueError):
        min_max_difference(-1)


@given(st.text(alphabet="0123456789", max_size=20))
def test_largest_odd_number_is_longest_odd_prefix(num):
    result = largest_odd_number(num)
    assert num.startswith(result)
    assert all(int(d) % 2 == 0 for d in num[len(result):])
    assert not result or int(result[-1]) % 2 == 1


def test_largest_odd_number_without_odd_digit_is_empty():
    assert not largest_odd_number("4206")


def test_largest_odd_number_keeps_odd_number():
    assert largest_odd_number("35427") == "35427"