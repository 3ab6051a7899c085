import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.cli import main, solve
from pushswap.stacks import StackError, Stacks


def _replay(numbers, moves):
    stacks = Stacks(numbers)
    for name in moves:
        getattr(stacks, name)()
    return stacks


def test_single_argument_is_split(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_separate_arguments_sorted_by_output(capsys):
    numbers = [3, 2, 1]
    assert main([str(n) for n in numbers]) == 0
    moves = capsys.readouterr().out.splitlines()
    stacks = _replay(numbers, moves)
    assert stacks.a == sorted(numbers)
    assert stacks.b == []


@pytest.mark.parametrize("args", [[], [""], ["", "1"]])
def test_no_input_fails_silently(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "args",
    [["1", "x"], ["1", "1"], ["2147483648"], ["   "], ["4 -2 4"], ["1", "+2"]],
)
def test_invalid_input_reports_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["-5", "0", "7"]) == 0
    assert capsys.readouterr().out == ""


def test_failed_move_reports_error_after_moves(capsys):
    assert main(["1 5 2 3 4"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    stacks = _replay([1, 5, 2, 3, 4], captured.out.splitlines())
    assert stacks.b == []


def test_solve_raises_for_failing_five():
    with pytest.raises(StackError):
        solve([1, 5, 2, 3, 4])


def test_solve_sorted_needs_no_moves():
    assert solve([1, 2, 3, 4, 5, 6]) == []


@given(
    st.one_of(
        st.lists(st.integers(-1000, 1000), min_size=1, max_size=4, unique=True),
        st.lists(st.integers(-(2**31), 2**31 - 1), min_size=6, max_size=30, unique=True),
    )
)
def test_solve_sorts(numbers):
    stacks = _replay(numbers, solve(numbers))
    assert stacks.a == sorted(numbers)
    assert stacks.b == []