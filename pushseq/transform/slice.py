"""
Slice combinators
=================

take / drop с per-invocation счётчиком.

Counters live inside the traversal closure, so every run starts fresh and
two runs never share state.
"""

from __future__ import annotations

from .._errors import Escape
from .._types import Consumer
from ..core import EMPTY, Seq


def take[T](seq: Seq[T], n: int) -> Seq[T]:
    """
    Take at most `n` elements.

    Stops the wrapped traversal right after the n-th element by raising an
    escape that only this run's scope catches, so `take` works on infinite
    sequences and composes under `map`, `append`, `concat` or another
    `take`.

    Example:
        repeat("x").take(3).to_list()  # ["x", "x", "x"]
    """
    if n <= 0:
        return EMPTY

    def traverse(k: Consumer[T]) -> None:
        remaining = n

        with Escape() as stop:

            def step(x: T) -> None:
                nonlocal remaining
                if remaining <= 0:
                    raise stop
                remaining -= 1
                k(x)
                if remaining == 0:
                    raise stop

            seq(step)

    return Seq(traverse, restartable=seq.restartable)


def drop[T](seq: Seq[T], n: int) -> Seq[T]:
    """Skip the first `n` elements, forward the rest. `n <= 0` is a no-op."""
    if n <= 0:
        return seq

    def traverse(k: Consumer[T]) -> None:
        remaining = n

        def step(x: T) -> None:
            nonlocal remaining
            if remaining > 0:
                remaining -= 1
            else:
                k(x)

        seq(step)

    return Seq(traverse, restartable=seq.restartable)


__all__ = ("drop", "take")
