"""
Опускание последовательности в контейнер.

Terminal adapters: each runs the sequence once and stores every element.
Never returns on an infinite sequence.
"""

from __future__ import annotations

import typing
from array import array
from collections import deque
from collections.abc import MutableMapping, MutableSequence

from ..core import Seq


# ============================================================================
# Lists / arrays
# ============================================================================


def to_list[T](seq: Seq[T]) -> list[T]:
    """Elements in traversal order."""
    result: list[T] = []
    seq(result.append)
    return result


def to_rev_list[T](seq: Seq[T]) -> list[T]:
    """
    Elements in reverse traversal order.

    The cheaper way to get a reversed list: one buffer reversed in place,
    instead of rev() (which buffers per run) followed by to_list (which
    copies again).
    """
    result: list[T] = []
    seq(result.append)
    result.reverse()
    return result


@typing.overload
def to_array[T](seq: Seq[T], typecode: None = None) -> list[T]: ...
@typing.overload
def to_array(seq: Seq[typing.Any], typecode: str) -> array[typing.Any]: ...
def to_array(seq: Seq[typing.Any], typecode: str | None = None) -> list[typing.Any] | array[typing.Any]:
    """
    Growable-buffer materialization.

    The length is not known before the run, so elements go into a growing
    buffer: a list, or an `array.array` of `typecode` when one is given.

    Example:
        to_array(int_range(1, 3), "i")  # array('i', [1, 2, 3])
    """
    if typecode is None:
        return to_list(seq)
    buffer = array(typecode)
    seq(buffer.append)
    return buffer


# ============================================================================
# Stack / queue
# ============================================================================


def to_stack[T](stack: MutableSequence[T], seq: Seq[T]) -> None:
    """Push every element onto a list used as a stack (push = append)."""
    seq(stack.append)


def to_queue[T](queue: deque[T], seq: Seq[T]) -> None:
    """Add every element at the back of the queue."""
    seq(queue.append)


# ============================================================================
# Hash tables
# ============================================================================


def hashtbl_add[K, V](table: MutableMapping[K, list[V]], seq: Seq[tuple[K, V]]) -> None:
    """
    Add bindings without erasing previous ones.

    `table` maps each key to all its bindings, newest first: `table[k][0]`
    is the current binding and the rest are the shadowed ones, in lookup
    order.
    """

    def step(pair: tuple[K, V]) -> None:
        key, value = pair
        bindings = table.get(key)
        if bindings is None:
            table[key] = [value]
        else:
            bindings.insert(0, value)

    seq(step)


def hashtbl_replace[K, V](table: MutableMapping[K, V], seq: Seq[tuple[K, V]]) -> None:
    """Add bindings, a later binding erases an earlier one (last write wins)."""

    def step(pair: tuple[K, V]) -> None:
        key, value = pair
        table[key] = value

    seq(step)


def hashtbl_keep[K, V](table: MutableMapping[K, V], seq: Seq[tuple[K, V]]) -> None:
    """Add bindings only for keys not bound yet (first write wins)."""

    def step(pair: tuple[K, V]) -> None:
        key, value = pair
        if key not in table:
            table[key] = value

    seq(step)


def to_hashtbl[K, V](seq: Seq[tuple[K, V]], *, keep_first: bool = False) -> dict[K, V]:
    """
    Build a dict from key/value pairs.

    Duplicate keys: last write wins, or first write wins with
    `keep_first=True`. Use hashtbl_add to keep every binding.
    """
    table: dict[K, V] = {}
    if keep_first:
        hashtbl_keep(table, seq)
    else:
        hashtbl_replace(table, seq)
    return table


# ============================================================================
# Text
# ============================================================================


def to_str(seq: Seq[str]) -> str:
    """Join a character (or string) sequence."""
    return "".join(to_list(seq))


__all__ = (
    "hashtbl_add",
    "hashtbl_keep",
    "hashtbl_replace",
    "to_array",
    "to_hashtbl",
    "to_list",
    "to_queue",
    "to_rev_list",
    "to_stack",
    "to_str",
)
