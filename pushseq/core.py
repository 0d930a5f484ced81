"""Traversal core

Seq[T] - push-based lazy sequence:
- not a container, but a reusable traversal procedure
- the sequence owns the loop, consumers are passive callbacks
- composing never touches elements, only running does

Fluent methods delegate to the module-level combinators so both styles work:

    to_list(take(map(of_list(xs), f), 3))
    of_list(xs).map(f).take(3).to_list()
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._types import Consumer, Predicate, Traversal


class Seq[T]:
    """
    Push-based sequence of T.

    Wraps a traversal procedure `(T -> None) -> None`. Calling the sequence
    with a consumer drives the consumer over every element, in order, then
    returns.

    `restartable` tags whether the traversal may be run any number of times
    with identical results (True for materialized sources) or at most once
    (input streams, iterators). Combinators propagate the tag; nothing
    enforces single use.
    """

    __slots__ = ("_traverse", "_restartable")

    def __init__(self, traverse: Traversal[T], /, *, restartable: bool = True) -> None:
        self._traverse = traverse
        self._restartable = restartable

    @property
    def restartable(self) -> bool:
        return self._restartable

    def __call__(self, consumer: Consumer[T], /) -> None:
        self._traverse(consumer)

    def __repr__(self) -> str:
        tag = "restartable" if self._restartable else "single-pass"
        return f"Seq({self._traverse!r}, {tag})"

    # Transform

    def map[U](self, f: Callable[[T], U], /) -> Seq[U]:
        from .transform.map import map
        return map(self, f)

    def filter(self, predicate: Predicate[T], /) -> Seq[T]:
        from .transform.map import filter
        return filter(self, predicate)

    def tap(self, effect: Callable[[T], None], /) -> Seq[T]:
        from .transform.effects import tap
        return tap(self, effect)

    def take(self, n: int, /) -> Seq[T]:
        from .transform.slice import take
        return take(self, n)

    def drop(self, n: int, /) -> Seq[T]:
        from .transform.slice import drop
        return drop(self, n)

    def rev(self) -> Seq[T]:
        from .transform.order import rev
        return rev(self)

    # Control

    def append(self, other: Seq[T], /) -> Seq[T]:
        from .control.combine import append
        return append(self, other)

    def flat_map[U](self, f: Callable[[T], Seq[U]], /) -> Seq[U]:
        from .control.combine import flat_map
        return flat_map(self, f)

    def cycle(self) -> Seq[T]:
        from .control.repeat import cycle
        return cycle(self)

    # Consume

    def iter(self, f: Consumer[T], /) -> None:
        from .collection.reduce import iter
        iter(self, f)

    def iteri(self, f: Callable[[int, T], None], /) -> None:
        from .collection.reduce import iteri
        iteri(self, f)

    def fold[A](self, f: Callable[[A, T], A], /, *, initial: A) -> A:
        from .collection.fold import fold
        return fold(self, f, initial=initial)

    def length(self) -> int:
        from .collection.reduce import length
        return length(self)

    def is_empty(self) -> bool:
        from .collection.reduce import is_empty
        return is_empty(self)

    def for_all(self, predicate: Predicate[T], /) -> bool:
        from .collection.quantify import for_all
        return for_all(self, predicate)

    def exists(self, predicate: Predicate[T], /) -> bool:
        from .collection.quantify import exists
        return exists(self, predicate)

    def to_list(self) -> list[T]:
        from .lift.down import to_list
        return to_list(self)

    def to_rev_list(self) -> list[T]:
        from .lift.down import to_rev_list
        return to_rev_list(self)

    def to_array(self, typecode: str | None = None) -> typing.Any:
        from .lift.down import to_array
        return to_array(self, typecode)


# ============================================================================
# Build / run
# ============================================================================


def from_iter[T](traverse: Traversal[T], /, *, restartable: bool = True) -> Seq[T]:
    """
    Build a sequence from a traversal procedure.

    No validation: whatever the procedure does becomes the sequence's
    semantics. Pass `restartable=False` when the procedure drains a
    single-pass source.

    Example:
        def two(k):
            k(1)
            k(2)

        from_iter(two).to_list()  # [1, 2]
    """
    return Seq(traverse, restartable=restartable)


def run[T](seq: Seq[T], consumer: Consumer[T], /) -> None:
    """Run the traversal with `consumer`. Consumer exceptions propagate."""
    seq(consumer)


def _nothing(_k: Consumer[typing.Any]) -> None:
    return None


EMPTY: Seq[typing.Never] = Seq(_nothing)


def empty() -> Seq[typing.Never]:
    """Sequence that never calls its consumer."""
    return EMPTY


def singleton[T](x: T, /) -> Seq[T]:
    """Sequence that calls its consumer exactly once with `x`."""

    def traverse(k: Consumer[T]) -> None:
        k(x)

    return Seq(traverse)


__all__ = ("EMPTY", "Seq", "empty", "from_iter", "run", "singleton")
