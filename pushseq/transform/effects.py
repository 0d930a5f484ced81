"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the elements that flow through."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Consumer
from ..core import Seq


def tap[T](seq: Seq[T], effect: Callable[[T], None]) -> Seq[T]:
    """
    Call `effect` on every element before forwarding it unchanged.

    Example:
        seen: list[int] = []
        of_list([1, 2, 3]).tap(seen.append).take(2).to_list()  # [1, 2]
        seen  # [1, 2]
    """

    def traverse(k: Consumer[T]) -> None:
        def step(x: T) -> None:
            effect(x)
            k(x)

        seq(step)

    return Seq(traverse, restartable=seq.restartable)


__all__ = ("tap",)
