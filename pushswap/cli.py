"""Command-line entry point: prints the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .ranks import create_ranks
from .sorting import radix_sort, sort_small
from .stacks import PushSwap
from .validation import InputError, has_duplicates, is_sorted, parse_args

_SMALL_LIMIT = 20


def solve(values: Sequence[int]) -> list[str]:
    """Return the list of operations that sorts the given distinct values."""
    if has_duplicates(values):
        raise InputError("duplicate values")
    if is_sorted(values):
        return []
    machine = PushSwap(create_ranks(values))
    if len(values) <= _SMALL_LIMIT:
        sort_small(machine)
    else:
        radix_sort(machine)
    return machine.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on the given arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_args(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in solve(values):
        sys.stdout.write(op + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())