"""Repeat combinators

Infinite sequences. Running them with a reduction that does not bound
consumption (iter, fold, length, to_list) never returns; bound them with
take, exists, for_all, is_empty or head."""

from __future__ import annotations

from .._errors import NotRestartableError
from .._types import Consumer
from ..core import Seq


def repeat[T](x: T) -> Seq[T]:
    """Infinite sequence of the same element."""

    def traverse(k: Consumer[T]) -> None:
        while True:
            k(x)

    return Seq(traverse)


def cycle[T](seq: Seq[T]) -> Seq[T]:
    """
    Cycle forever through `seq`.

    Raises NotRestartableError right away if `seq` is tagged single-pass,
    instead of silently cycling over an exhausted source.

    NOTE: cycling an empty restartable sequence spins forever without
    calling the consumer.
    """
    if not seq.restartable:
        raise NotRestartableError("cycle")

    def traverse(k: Consumer[T]) -> None:
        while True:
            seq(k)

    return Seq(traverse)


__all__ = ("cycle", "repeat")
