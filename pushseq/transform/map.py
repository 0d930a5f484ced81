"""Map / filter combinators

Element-wise rewriting of the consumer: no intermediate storage,
the function or predicate runs only when the sequence is run."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Consumer, Predicate
from ..core import Seq


def map[T, U](seq: Seq[T], f: Callable[[T], U]) -> Seq[U]:
    """
    Apply `f` to every element, lazily.

    Example:
        of_list([1, 2, 3]).map(lambda x: x * 10).to_list()  # [10, 20, 30]
    """

    def traverse(k: Consumer[U]) -> None:
        seq(lambda x: k(f(x)))

    return Seq(traverse, restartable=seq.restartable)


def filter[T](seq: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """Keep elements satisfying `predicate`, relative order preserved."""

    def traverse(k: Consumer[T]) -> None:
        def step(x: T) -> None:
            if predicate(x):
                k(x)

        seq(step)

    return Seq(traverse, restartable=seq.restartable)


__all__ = ("filter", "map")
