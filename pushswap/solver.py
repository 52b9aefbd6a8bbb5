"""Chunk-based strategy that sorts stack ``a`` using the push_swap operations."""

from __future__ import annotations

from typing import Sequence

from pushswap.stacks import Number, Stacks


def get_chunk_size(stack_size: int) -> int:
    """How many ranks one chunk spans for a stack of the given size."""
    if stack_size < 5:
        return stack_size
    if stack_size <= 100:
        return stack_size // 5
    if stack_size <= 500:
        return stack_size // 10
    return 20


def find_max_position(stack: Sequence[Number]) -> int:
    """Position of the first element with the highest index (0 if empty)."""
    best = -1
    position = 0
    for i, number in enumerate(stack):
        if number.index > best:
            best = number.index
            position = i
    return position


def find_position_in_chunk(stack: Sequence[Number], low: int, high: int) -> int:
    """Position of the first element whose index is in ``[low, high]``, or -1."""
    return next(
        (i for i, number in enumerate(stack) if low <= number.index <= high), -1
    )


def rotate_to_top(stacks: Stacks, position: int, name: str) -> None:
    """Bring the element at ``position`` of stack ``name`` to its top.

    Rotates upwards when the element is in the upper half, downwards
    otherwise. Any name other than ``"a"`` means stack ``b``.
    """
    on_a = name == "a"
    size = len(stacks.a if on_a else stacks.b)
    if position <= size // 2:
        step = stacks.ra if on_a else stacks.rb
        count = position
    else:
        step = stacks.rra if on_a else stacks.rrb
        count = size - position
    for _ in range(count):
        step()


def push_swap(stacks: Stacks) -> Stacks:
    """Sort ``stacks.a`` by index, recording the operations on ``stacks``.

    Elements are pushed to ``b`` chunk by chunk, then pulled back largest
    first. Raises :class:`RuntimeError` when elements below the current
    chunk are left on ``a``, since the strategy can then never finish.
    """
    chunk = get_chunk_size(len(stacks.a))
    low = 0
    high = chunk - 1
    while stacks.a:
        top = stacks.a[0].index
        if low <= top <= high:
            stacks.pb()
            if top < (low + high) // 2:
                stacks.rb()
            low += 1
            high = low + chunk - 1
            continue
        position = find_position_in_chunk(stacks.a, low, high)
        if position != -1:
            rotate_to_top(stacks, position, "a")
            continue
        if all(number.index < low for number in stacks.a):
            raise RuntimeError(
                "elements left below the current chunk; cannot make progress"
            )
        stacks.ra()
        high += chunk

    while stacks.b:
        rotate_to_top(stacks, find_max_position(stacks.b), "b")
        stacks.pa()
    return stacks