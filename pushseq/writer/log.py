"""
Log - записи, собранные во время свёртки
========================================
"""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from ..core import Seq


class Log[A](list[A]):
    """
    Entries written by fold_w steps, in traversal order.

    fold_w keeps one Log per run and extends it in place with each step's
    entries. `combine` and `tell` return new logs and leave both operands
    alone, for steps that build their own entries out of smaller pieces.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Log holding exactly `items`."""
        return Log[T](items)

    @staticmethod
    def from_seq[T](seq: Seq[T]) -> Log[T]:
        """Run `seq` once, recording every element as an entry."""
        result: Log[T] = Log()
        seq(result.append)
        return result

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        New log: this one's entries, then `other`'s.

        Example:
            Log.of("read:a").combine(Log.of("read:b"))  # Log(["read:a", "read:b"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """New log with `item` added at the end."""
        result: Log[A] = Log(self)
        result.append(item)
        return result


__all__ = ("Log",)
