"""Sorting strategies that drive a PushSwap machine."""

from __future__ import annotations

from .stacks import PushSwap


def radix_sort(machine: PushSwap) -> None:
    """Sort stack a, holding ranks 0..n-1, by binary radix passes through b."""
    size = len(machine.a)
    if size == 0:
        return
    max_bits = (size - 1).bit_length()
    for bit in range(max_bits):
        for _ in range(size):
            if (machine.a[0] >> bit) & 1 == 0:
                machine.pb()
            else:
                machine.ra()
        while machine.b:
            machine.pa()


def _sort_three(machine: PushSwap) -> None:
    x, y, z = machine.a[0], machine.a[1], machine.a[-1]
    if x > y and y < z and x < z:
        machine.sa()
    elif x > y and y > z:
        machine.sa()
        machine.rra()
    elif x > y and y < z and x > z:
        machine.ra()
    elif x < y and y > z and x < z:
        machine.sa()
        machine.ra()
    elif x < y and y > z and x > z:
        machine.rra()


def _min_index(machine: PushSwap) -> int:
    return min(range(len(machine.a)), key=machine.a.__getitem__)


def _rotate_to_top(machine: PushSwap, index: int) -> None:
    size = len(machine.a)
    if index <= size // 2:
        for _ in range(index):
            machine.ra()
    else:
        for _ in range(size - index):
            machine.rra()


def sort_small(machine: PushSwap) -> None:
    """Sort stack a when it holds at most 20 elements."""
    size = len(machine.a)
    if size == 2:
        machine.sa()
    elif size == 3:
        _sort_three(machine)
    elif size <= 20:
        while len(machine.a) > 3:
            _rotate_to_top(machine, _min_index(machine))
            machine.pb()
        _sort_three(machine)
        while machine.b:
            machine.pa()