"""Ordering combinators"""

from __future__ import annotations

from .._types import Consumer
from ..core import Seq


def rev[T](seq: Seq[T]) -> Seq[T]:
    """
    Reverse the sequence. O(n) time and memory per run.

    Each run materializes the wrapped sequence into a fresh buffer, then
    feeds it back to front. Running it over an infinite sequence never
    returns; nothing checks for that.
    """

    def traverse(k: Consumer[T]) -> None:
        buffer: list[T] = []
        seq(buffer.append)
        for x in reversed(buffer):
            k(x)

    return Seq(traverse, restartable=seq.restartable)


__all__ = ("rev",)
