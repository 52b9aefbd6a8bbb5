"""Sorting numbers by value and giving each one its rank."""

from __future__ import annotations

import heapq
from dataclasses import replace
from operator import attrgetter
from typing import Iterable, List, Sequence

from pushswap.stacks import Number

_BY_VALUE = attrgetter("value")


def merge(left: Sequence[Number], right: Sequence[Number]) -> List[Number]:
    """Merge two lists sorted by value; on equal values ``left`` comes first."""
    return list(heapq.merge(left, right, key=_BY_VALUE))


def merge_sort(numbers: Sequence[Number]) -> List[Number]:
    """Return copies of ``numbers`` in ascending order of value.

    The sort is stable and leaves the input untouched.
    """
    if len(numbers) <= 1:
        return [replace(number) for number in numbers]
    half = (len(numbers) + 1) // 2
    return merge(merge_sort(numbers[:half]), merge_sort(numbers[half:]))


def find_index(value: int, sorted_numbers: Sequence[Number]) -> int:
    """Binary search for ``value``; return its position or -1 if absent."""
    start, end = 0, len(sorted_numbers) - 1
    while start <= end:
        middle = (start + end) // 2
        current = sorted_numbers[middle].value
        if value == current:
            return middle
        if value < current:
            end = middle - 1
        else:
            start = middle + 1
    return -1


def set_sorted_indexes(
    numbers: Iterable[Number], sorted_numbers: Sequence[Number]
) -> None:
    """Set each number's ``index`` to its position in ``sorted_numbers``."""
    for number in numbers:
        number.index = find_index(number.value, sorted_numbers)


def values(numbers: Iterable[Number]) -> List[int]:
    """Return the plain values of ``numbers`` in order."""
    return [number.value for number in numbers]