"""The two stacks of push_swap and the operations allowed on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass
class Number:
    """A value on a stack together with its rank among all values."""

    value: int
    index: int = 0


def swap(stack: MutableSequence[T]) -> None:
    """Exchange the two top elements; do nothing with fewer than two."""
    if len(stack) < 2:
        return
    stack[0], stack[1] = stack[1], stack[0]


def push(destination: MutableSequence[T], source: MutableSequence[T]) -> None:
    """Move the top of ``source`` onto the top of ``destination``."""
    if not source:
        return
    destination.insert(0, source.pop(0))


def rotate(stack: MutableSequence[T]) -> None:
    """Shift every element up by one; the top becomes the bottom."""
    if len(stack) < 2:
        return
    stack.append(stack.pop(0))


def reverse_rotate(stack: MutableSequence[T]) -> None:
    """Shift every element down by one; the bottom becomes the top."""
    if len(stack) < 2:
        return
    stack.insert(0, stack.pop())


@dataclass
class Stacks:
    """Stacks ``a`` and ``b`` with the named push_swap operations.

    Every operation is recorded in ``operations`` and, when ``output`` is
    set, written to it on a line of its own.
    """

    a: list = field(default_factory=list)
    b: list = field(default_factory=list)
    output: Optional[TextIO] = None
    operations: list = field(default_factory=list)

    def _record(self, name: str) -> None:
        self.operations.append(name)
        if self.output is not None:
            self.output.write(name + "\n")

    def sa(self) -> None:
        """Swap the top two of ``a``."""
        swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the top two of ``b``."""
        swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        swap(self.a)
        swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        push(self.a, self.b)
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        push(self.b, self.a)
        self._record("pb")

    def ra(self) -> None:
        """Rotate ``a`` upwards."""
        rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards."""
        rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        rotate(self.a)
        rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Rotate ``a`` downwards."""
        reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards."""
        reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        reverse_rotate(self.a)
        reverse_rotate(self.b)
        self._record("rrr")