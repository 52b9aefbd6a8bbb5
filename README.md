# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a fixed set of
stack operations. Every operation is recorded, and can be printed as it is
performed.

## Operations

| Name  | Effect                                       |
| ----- | -------------------------------------------- |
| `sa`  | swap the top two elements of `a`             |
| `sb`  | swap the top two elements of `b`             |
| `ss`  | `sa` and `sb` together                       |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` up: its top goes to the bottom    |
| `rb`  | rotate `b` up                                |
| `rr`  | `ra` and `rb` together                       |
| `rra` | rotate `a` down: its bottom goes to the top  |
| `rrb` | rotate `b` down                              |
| `rrr` | `rra` and `rrb` together                     |

Operations on a stack with too few elements do nothing, but are still
recorded.

## Installing

```
pip install .
```

## Command line

```
pushswap 3 1 2 7 15 10 4
```

Each argument is converted leniently with `atoi`: leading whitespace and one
sign are skipped, digits are read up to the first non-digit, and the result
wraps as a 32-bit integer. The command then prints, in order:

1. the values as read, each followed by a space;
2. the values in ascending order, each on a new line followed by a space;
3. a line `value V, index I` for each value, where `I` is its rank;
4. every operation of the sort, one per line, as it is performed;
5. the `value V, index I` lines again for the final contents of `a`.

The sort uses a chunk-based strategy: elements are pushed to `b` a range of
ranks at a time and brought back to `a` largest first. If the strategy can
make no further progress (as can happen when values repeat), the command
writes `Error` to standard error and exits with status 1; otherwise it exits
with status 0.

## Library

- `pushswap.stacks`: `Number` (a `value` and its rank `index`), `Stacks` with
  lists `a` and `b`, one method per operation, a list `operations` of the
  names performed and an optional `output` text stream each name is written
  to; and the plain list operations `swap`, `push`, `rotate` and
  `reverse_rotate`.
- `pushswap.parsing`: `parse_args` splits each argument on spaces, checks
  tokens with `is_integer_token` and `parse_integer`, and raises `ParseError`
  (a `ValueError`) for a malformed token, a value outside the 32-bit range, or
  no integers at all. `has_duplicates`, `split` and `atoi` are also provided.
- `pushswap.ordering`: `merge_sort` returns sorted copies, `merge` joins two
  sorted lists, `find_index` binary-searches a value, `set_sorted_indexes`
  assigns each number its rank, and `values` lists the plain values.
- `pushswap.solver`: `push_swap(stacks)` runs the sort on a `Stacks`, using
  `get_chunk_size`, `find_position_in_chunk`, `find_max_position` and
  `rotate_to_top`. It raises `RuntimeError` when it cannot make progress.
- `pushswap.formatting`: `sprintf` and `printf` with `%c %s %p %d %i %u %x
  %X %%` (no flags, widths or precision), plus `format_char`,
  `format_string`, `format_integer`, `format_unsigned`, `format_hex`,
  `format_pointer`, `itoa`, `utoa` and `hex_letter`.

```python
from pushswap.ordering import merge_sort, set_sorted_indexes
from pushswap.parsing import parse_args
from pushswap.solver import push_swap
from pushswap.stacks import Stacks

numbers = parse_args(["3 1 2", "7"])
set_sorted_indexes(numbers, merge_sort(numbers))
stacks = push_swap(Stacks(a=numbers))
print(stacks.operations)
```

## What it does not do

- The `pushswap` command does not validate its arguments: it does not use
  `parse_args` or `has_duplicates`, so malformed or repeated values are
  accepted as `atoi` reads them.
- There is no checker command that reads a list of operations and verifies
  that they sort a given stack.

## Tests

```
pip install ".[test]"
pytest
```