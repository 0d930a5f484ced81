"""
Combine combinators
===================

Последовательная склейка последовательностей.

None of these intercept escapes: a `take` wrapped around an `append` stops
both halves, and an escape raised inside the first half never resumes into
the second.
"""

from __future__ import annotations

from collections.abc import Callable

from .._helpers import all_restartable
from .._types import Consumer
from ..core import Seq


def append[T](first: Seq[T], second: Seq[T]) -> Seq[T]:
    """
    Run `first` fully, then `second`.

    If `first` is infinite, `second` is never reached.
    """

    def traverse(k: Consumer[T]) -> None:
        first(k)
        second(k)

    return Seq(traverse, restartable=first.restartable and second.restartable)


def append_all[T](*seqs: Seq[T]) -> Seq[T]:
    """Variadic append: run every argument in order."""

    def traverse(k: Consumer[T]) -> None:
        for s in seqs:
            s(k)

    return Seq(traverse, restartable=all_restartable(seqs))


def concat[T](seqs: Seq[Seq[T]]) -> Seq[T]:
    """
    Flatten a sequence of sequences.

    The outer sequence is traversed once per run; each inner sequence is run
    once per outer element. The result carries the outer tag only: inner
    tags are not known before running.
    """

    def traverse(k: Consumer[T]) -> None:
        seqs(lambda inner: inner(k))

    return Seq(traverse, restartable=seqs.restartable)


def flat_map[T, U](seq: Seq[T], f: Callable[[T], Seq[U]]) -> Seq[U]:
    """Map every element to a sequence and flatten. `concat(map(seq, f))`."""

    def traverse(k: Consumer[U]) -> None:
        seq(lambda x: f(x)(k))

    return Seq(traverse, restartable=seq.restartable)


__all__ = ("append", "append_all", "concat", "flat_map")
