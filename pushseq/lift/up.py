"""
Подъем контейнеров в последовательность (Seq).

Every function here is a one-call adapter: the returned Seq captures a
reference to the container and walks it when run. Nothing is copied, so a
container mutated between runs shows the new contents (don't mutate it
during a run).
"""

from __future__ import annotations

import typing
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .._types import Consumer
from ..core import Seq


@dataclass(frozen=True, slots=True)
class ChannelPolicy:
    """Configuration for of_in_channel."""

    chunk_size: int = 4096

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError("ChannelPolicy.chunk_size must be >= 1")


class TextSource(typing.Protocol):
    def read(self, size: int = -1, /) -> str: ...


# ============================================================================
# Ordered collections
# ============================================================================


def of_list[T](xs: Sequence[T]) -> Seq[T]:
    """
    Elements of any ordered collection, front to back.

    Example:
        from pushseq import lift as L

        L.up.of_list([1, 2, 3]).map(str).to_list()  # ["1", "2", "3"]
    """

    def traverse(k: Consumer[T]) -> None:
        for x in xs:
            k(x)

    return Seq(traverse)


def of_array[T](xs: Sequence[T]) -> Seq[T]:
    """Elements of a list or `array.array`, by index."""

    def traverse(k: Consumer[T]) -> None:
        for i in range(len(xs)):
            k(xs[i])

    return Seq(traverse)


def array_slice[T](xs: Sequence[T], start: int, stop: int) -> Seq[T]:
    """
    Elements whose indexes range from `start` to `stop`, both inclusive.

    NOTE: `stop` is inclusive, unlike Python slicing, and indexes never wrap:
    a negative `start`, or a `stop` past the end of a non-empty range, raises
    IndexError when the sequence is run.
    """

    def traverse(k: Consumer[T]) -> None:
        if start < 0 or (stop >= start and stop >= len(xs)):
            raise IndexError(f"array_slice({start}, {stop}) out of bounds for length {len(xs)}")
        for i in range(start, stop + 1):
            k(xs[i])

    return Seq(traverse)


def of_iterator[T](it: Iterable[T]) -> Seq[T]:
    """
    Elements of an arbitrary iterable, consumed on the first run.

    Tagged single-pass: a generator or file object is exhausted after one
    run, and a second run sees nothing.
    """

    def traverse(k: Consumer[T]) -> None:
        for x in it:
            k(x)

    return Seq(traverse, restartable=False)


def int_range(start: int, stop: int) -> Seq[int]:
    """Integers `start..stop` inclusive, ascending by 1. Empty if stop < start."""

    def traverse(k: Consumer[int]) -> None:
        for i in range(start, stop + 1):
            k(i)

    return Seq(traverse)


# ============================================================================
# Stack / queue
# ============================================================================


def of_stack[T](stack: Sequence[T]) -> Seq[T]:
    """
    Elements of a list used as a stack (push = append), top first.
    """

    def traverse(k: Consumer[T]) -> None:
        for x in reversed(stack):
            k(x)

    return Seq(traverse)


def of_queue[T](queue: deque[T]) -> Seq[T]:
    """Elements of a deque used as a queue, FIFO order."""

    def traverse(k: Consumer[T]) -> None:
        for x in queue:
            k(x)

    return Seq(traverse)


# ============================================================================
# Hash tables
# ============================================================================


def of_hashtbl[K, V](table: Mapping[K, V]) -> Seq[tuple[K, V]]:
    """Key/value pairs, in the mapping's iteration order."""

    def traverse(k: Consumer[tuple[K, V]]) -> None:
        for item in table.items():
            k(item)

    return Seq(traverse)


def hashtbl_keys[K](table: Mapping[K, object]) -> Seq[K]:
    def traverse(k: Consumer[K]) -> None:
        for key in table:
            k(key)

    return Seq(traverse)


def hashtbl_values[V](table: Mapping[object, V]) -> Seq[V]:
    def traverse(k: Consumer[V]) -> None:
        for value in table.values():
            k(value)

    return Seq(traverse)


# ============================================================================
# Text
# ============================================================================


def of_str(s: str) -> Seq[str]:
    """Characters of a string."""

    def traverse(k: Consumer[str]) -> None:
        for ch in s:
            k(ch)

    return Seq(traverse)


def of_in_channel(stream: TextSource, policy: ChannelPolicy = ChannelPolicy()) -> Seq[str]:
    """
    Characters read lazily from a text stream, `policy.chunk_size` at a time.

    Single-pass: the stream is drained by the first run. Stopping early (with
    take, exists...) leaves the unread part in the stream, minus whatever was
    already buffered from the current chunk.
    """

    def traverse(k: Consumer[str]) -> None:
        while chunk := stream.read(policy.chunk_size):
            for ch in chunk:
                k(ch)

    return Seq(traverse, restartable=False)


__all__ = (
    "ChannelPolicy",
    "array_slice",
    "hashtbl_keys",
    "hashtbl_values",
    "int_range",
    "of_array",
    "of_hashtbl",
    "of_in_channel",
    "of_iterator",
    "of_list",
    "of_queue",
    "of_stack",
    "of_str",
)
