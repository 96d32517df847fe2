import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    InputError,
    has_syntax_error,
    parse_long,
    parse_values,
    split_words,
)


def test_split_words_drops_empty():
    assert split_words("  3 1   2 ", " ") == ["3", "1", "2"]


def test_split_words_only_separators():
    assert split_words("   ", " ") == []


def test_split_words_other_separator():
    assert split_words("4,5,,6", ",") == ["4", "5", "6"]


@given(st.lists(st.text(alphabet="0123456789-+", min_size=1), max_size=10))
def test_split_words_round_trip(words):
    assert split_words(" ".join(words), " ") == words


@given(st.integers(-(2**40), 2**40))
def test_parse_long_round_trip(number):
    assert parse_long(str(number)) == number


def test_parse_long_skips_whitespace_and_sign():
    assert parse_long(" \t-42") == -42
    assert parse_long("+42") == 42


def test_parse_long_stops_at_non_digit():
    assert parse_long("12abc") == 12


def test_parse_long_without_digits():
    assert parse_long("-") == 0
    assert parse_long("") == 0


@pytest.mark.parametrize("args", [["1", "-2", "+3"], [], ["007"]])
def test_syntax_accepts(args):
    assert has_syntax_error(args) is False


@pytest.mark.parametrize(
    "args",
    [["1", "a"], ["-"], ["+"], ["5-"], [" 5"], [""], ["--1"], ["1.5"]],
)
def test_syntax_rejects(args):
    assert has_syntax_error(args) is True


@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=30))
def test_parse_values_round_trip(numbers):
    assert parse_values([str(n) for n in numbers]) == numbers


def test_parse_values_accepts_int_bounds():
    words = [str(2**31 - 1), str(-(2**31))]
    assert parse_values(words) == [2**31 - 1, -(2**31)]


@pytest.mark.parametrize(
    "args",
    [
        ["1", "2", "1"],
        ["+1", "1"],
        ["1", "x"],
        [str(2**31)],
        [str(-(2**31) - 1)],
        ["-"],
    ],
)
def test_parse_values_rejects(args):
    with pytest.raises(InputError) as info:
        parse_values(args)
    assert str(info.value) == "Error"


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_values(["0", "-0"])