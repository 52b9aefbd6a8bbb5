"""Command that ranks its arguments, prints them and sorts them."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from pushswap.ordering import merge_sort, set_sorted_indexes
from pushswap.parsing import atoi
from pushswap.solver import push_swap
from pushswap.stacks import Number, Stacks


def _write_table(out: TextIO, numbers: Iterable[Number]) -> None:
    for number in numbers:
        out.write(f"value {number.value}, index {number.index}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command on ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout

    a = [Number(atoi(arg)) for arg in args]
    out.write("".join(f"{number.value} " for number in a))

    sorted_numbers = merge_sort(a)
    out.write("".join(f"\n{number.value} " for number in sorted_numbers))

    set_sorted_indexes(a, sorted_numbers)
    _write_table(out, a)

    stacks = Stacks(a=a, output=out)
    try:
        push_swap(stacks)
    except RuntimeError:
        out.flush()
        print("Error", file=sys.stderr)
        return 1

    _write_table(out, stacks.a)
    return 0


if __name__ == "__main__":
    sys.exit(main())