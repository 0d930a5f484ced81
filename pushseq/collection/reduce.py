"""Reductions that consume the whole sequence (or stop at the first element)."""

from __future__ import annotations

from collections.abc import Callable

from .._errors import Escape
from .._types import Consumer
from ..core import Seq


def iter[T](seq: Seq[T], f: Consumer[T]) -> None:
    """Run the sequence with `f` as consumer."""
    seq(f)


def iteri[T](seq: Seq[T], f: Callable[[int, T], None]) -> None:
    """Like iter, with the 0-based index of each element."""
    index = 0

    def step(x: T) -> None:
        nonlocal index
        i = index
        index += 1
        f(i, x)

    seq(step)


def length(seq: Seq[object]) -> int:
    """Number of elements. Never returns on an infinite sequence."""
    count = 0

    def step(_: object) -> None:
        nonlocal count
        count += 1

    seq(step)
    return count


def is_empty(seq: Seq[object]) -> bool:
    """True if the sequence has no element. Stops at the first element."""
    seen = False

    with Escape() as stop:

        def step(_: object) -> None:
            nonlocal seen
            seen = True
            raise stop

        seq(step)

    return not seen


__all__ = ("is_empty", "iter", "iteri", "length")
