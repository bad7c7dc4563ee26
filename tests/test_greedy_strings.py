import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.greedy_strings import (
    answer_string,
    clear_stars,
    max_active_sections_after_trade,
    max_substrings,
    robot_with_string,
)


def _is_subsequence(small, big):
    remaining = iter(big)
    return all(ch in remaining for ch in small)


def test_robot_with_string_worked_example():
    assert robot_with_string("zza") == "azz"


@given(st.text(alphabet="abcd", max_size=12))
def test_robot_with_string_invariants(s):
    result = robot_with_string(s)
    assert sorted(result) == sorted(s)
    assert result <= s
    assert result <= s[::-1]


@given(st.text(alphabet="abcd", max_size=12))
def test_robot_with_string_keeps_sorted_input(s):
    ordered = "".join(sorted(s))
    assert robot_with_string(ordered) == ordered


def test_clear_stars_worked_example():
    assert clear_stars("aaba*") == "aab"


def test_clear_stars_without_stars_or_letters_before():
    assert clear_stars("abc") == "abc"
    assert clear_stars("*a") == "a"


@given(st.text(alphabet="ab*", max_size=15))
def test_clear_stars_invariants(s):
    result = clear_stars(s)
    letters = s.replace("*", "")
    assert "*" not in result
    assert _is_subsequence(result, letters)
    assert len(letters) - len(result) <= s.count("*")


def test_answer_string_worked_example():
    assert answer_string("dbca", 2) == "dbc"


@pytest.mark.parametrize("num_friends", [0, 5])
def test_answer_string_rejects_bad_split(num_friends):
    with pytest.raises(ValueError):
        answer_string("abcd", num_friends)


def test_max_active_sections_worked_example():
    assert max_active_sections_after_trade("1000100") == 7


@given(st.integers(0, 6), st.integers(0, 6))
def test_max_active_sections_single_zero_block(zeros, ones):
    assert max_active_sections_after_trade("0" * zeros + "1" * ones) == ones


@given(st.text(alphabet="01", max_size=15))
def test_max_active_sections_bounds(s):
    result = max_active_sections_after_trade(s)
    assert s.count("1") <= result <= len(s)
    assert max_active_sections_after_trade("1" * len(s)) == len(s)


def test_max_active_sections_rejects_non_binary():
    with pytest.raises(ValueError):
        max_active_sections_after_trade("012")


def test_max_substrings_worked_example():
    assert max_substrings("abcdeafdef") == 2


@given(st.integers(0, 6))
def test_max_substrings_of_single_letter(n):
    assert max_substrings("a" * (4 * n)) == n


@given(st.text(alphabet="abc", max_size=3))
def test_max_substrings_short_words(word):
    assert not max_substrings(word)


@given(st.text(alphabet="abc", max_size=20))
def test_max_substrings_bound(word):
    assert 0 <= max_substrings(word) <= len(word) // 4