import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.cli import main, solve
from pushswap.stacks import PushSwap
from pushswap.validation import InputError


def _apply(values, ops):
    machine = PushSwap(values)
    for op in ops:
        getattr(machine, op)()
    return list(machine.a), list(machine.b)


def test_solve_sorted_input_gives_nothing():
    assert solve([1, 2, 3]) == []
    assert solve([]) == []


def test_solve_two():
    assert solve([2, 1]) == ["sa"]


def test_solve_rejects_duplicates():
    with pytest.raises(InputError):
        solve([1, 1])


@settings(max_examples=40)
@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1),
                unique=True, max_size=60))
def test_solve_sorts(values):
    a, b = _apply(values, solve(values))
    assert a == sorted(values)
    assert b == []


def test_main_prints_operations(capsys):
    assert main(["3", "-1", "2"]) == 0
    out = capsys.readouterr().out
    ops = out.split()
    assert out.endswith("\n")
    assert _apply([3, -1, 2], ops)[0] == [-1, 2, 3]


def test_main_no_args(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_sorted_prints_nothing(capsys):
    assert main(["1", "2"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1", "a"], ["1", "1"], ["2147483648"], ["-"]])
def test_main_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""