# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations. It prints the operations that do the sorting,
one per line.

## Operations

| Name  | Effect                                             |
|-------|----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                   |
| `pa`  | move the top of `b` onto `a`                       |
| `pb`  | move the top of `a` onto `b`                       |
| `ra`  | rotate `a` up: the top goes to the bottom          |
| `rra` | rotate `a` down: the bottom comes to the top       |

The first argument is the top of stack `a`. An operation that cannot apply
does nothing and is not recorded. Examples are `pb` on an empty `a`, and
`sa`, `ra` or `rra` on an `a` with fewer than two elements.

## Command line

```
pip install .
push_swap 3 2 1
```

This prints:

```
sa
rra
```

You can also run the same command with `python -m pushswap.cli 3 2 1`.

How the command behaves:

- With no arguments, or with input that is already sorted, it prints nothing and exits with status 0.
- An argument is rejected in any of these cases:
  - it is not an optional `+`/`-` sign followed by decimal digits;
  - it lies outside the 32-bit signed integer range;
  - it appears twice.

  For a rejected argument, `Error` is written to standard error and the exit status is 1.

Up to 20 numbers are sorted by repeatedly rotating the minimum to the top
of `a` and pushing it to `b`. The last three numbers are sorted in place,
and then everything is pushed back. Larger inputs use a binary radix sort
on the ranks of the values.

## Library

```python
from pushswap.cli import solve
from pushswap.stacks import PushSwap
from pushswap.ranks import create_ranks
from pushswap.sorting import sort_small, radix_sort
from pushswap.validation import parse_args, InputError

solve([3, 2, 1])          # ['sa', 'rra']
create_ranks([40, -5, 7]) # [2, 0, 1]

machine = PushSwap([2, 0, 1])
sort_small(machine)
machine.ops               # operations applied, in order
list(machine.a)           # [0, 1, 2]

try:
    parse_args(["1", "x"])
except InputError:
    ...
```

- `solve(values)` returns the operation names for a sequence of distinct integers. It returns `[]` if the values are already sorted, and raises `InputError` on duplicates.
- `PushSwap` holds the stacks as deques `a` and `b`, with the top at index 0. It records every applied operation in `ops`.
- `sort_small` handles at most 20 elements. `radix_sort` expects `a` to hold the ranks `0..n-1`.
- `pushswap.validation` provides the following functions:
  - `parse_args`
  - `is_digit_str`
  - `is_int_range`
  - `has_duplicates`
  - `is_sorted`
  - `to_int`: an atoi-style conversion to a 32-bit integer.

## What it does not do

The package only produces the list of operations. It has no checker that
reads operations back and verifies a sort. It does not implement the
operations `sb`, `ss`, `rb`, `rr`, `rrb` or `rrr`.

## Tests

```
pip install .[test]
pytest
```