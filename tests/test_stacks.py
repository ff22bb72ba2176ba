from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import PushSwap


def test_initial_state():
    machine = PushSwap([1, 2, 3])
    assert list(machine.a) == [1, 2, 3]
    assert list(machine.b) == []
    assert machine.ops == []


def test_pb_and_pa():
    machine = PushSwap([1, 2, 3])
    machine.pb()
    assert list(machine.a) == [2, 3]
    assert list(machine.b) == [1]
    machine.pb()
    assert list(machine.b) == [2, 1]
    machine.pa()
    assert list(machine.a) == [2, 3]
    assert list(machine.b) == [1]
    assert machine.ops == ["pb", "pb", "pa"]


def test_ra_and_rra():
    machine = PushSwap([1, 2, 3])
    machine.ra()
    assert list(machine.a) == [2, 3, 1]
    machine.rra()
    machine.rra()
    assert list(machine.a) == [3, 1, 2]
    assert machine.ops == ["ra", "rra", "rra"]


def test_sa():
    machine = PushSwap([1, 2, 3])
    machine.sa()
    assert list(machine.a) == [2, 1, 3]
    assert machine.ops == ["sa"]


def test_noops_are_not_recorded():
    machine = PushSwap([5])
    machine.pa()
    machine.ra()
    machine.sa()
    machine.rra()
    assert list(machine.a) == [5]
    assert machine.ops == []
    empty = PushSwap([])
    empty.pb()
    assert empty.ops == []


@given(st.lists(st.integers(), min_size=2))
def test_ra_then_rra_is_identity(values):
    machine = PushSwap(values)
    machine.ra()
    machine.rra()
    assert list(machine.a) == values
    assert machine.ops == ["ra", "rra"]


@given(st.lists(st.integers(), min_size=1))
def test_pb_then_pa_is_identity(values):
    machine = PushSwap(values)
    machine.pb()
    machine.pa()
    assert list(machine.a) == values
    assert list(machine.b) == []