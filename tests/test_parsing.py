import pytest
from hypothesis import given, strategies as st

from pushswap.parsing import (
    InputError,
    check_duplicates,
    check_limits,
    parse_arguments,
    validate_tokens,
)


def test_separate_arguments():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]


def test_single_argument_is_split_on_spaces():
    assert parse_arguments(["  3 1   2 "]) == [3, 1, 2]


def test_negative_numbers():
    assert parse_arguments(["-5", "7"]) == [-5, 7]


def test_no_arguments_give_nothing():
    assert parse_arguments([]) == []
    assert parse_arguments(["", "1"]) == []


def test_blank_single_argument_is_error():
    with pytest.raises(InputError):
        parse_arguments(["   "])


def test_empty_middle_token_reads_as_zero():
    assert parse_arguments(["1", "", "2"]) == [1, 0, 2]


@pytest.mark.parametrize("token", ["+5", "-", "1a", "--1", "1-", "1 2", "x"])
def test_bad_tokens_rejected(token):
    with pytest.raises(InputError):
        parse_arguments(["0", token])


def test_error_message():
    with pytest.raises(InputError, match="^Error$"):
        validate_tokens(["abc"])


def test_limits():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]
    with pytest.raises(InputError):
        parse_arguments(["2147483648", "1"])
    with pytest.raises(InputError):
        parse_arguments(["-2147483649"])


def test_check_limits_directly():
    with pytest.raises(InputError):
        check_limits([0, 2**31])


def test_duplicates_rejected():
    with pytest.raises(InputError):
        parse_arguments(["4", "2", "4"])
    with pytest.raises(InputError):
        check_duplicates([1, 1])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1", "1"])


@given(st.lists(st.integers(-(2**31), 2**31 - 1), min_size=2, unique=True))
def test_round_trip_through_text(numbers):
    args = [str(n) for n in numbers]
    assert parse_arguments(args) == numbers
    assert parse_arguments([" ".join(args)]) == numbers