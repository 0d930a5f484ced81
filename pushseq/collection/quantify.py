"""
Quantifiers
===========

Short-circuiting reductions: each stops the traversal as soon as the answer
is known.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._errors import EmptySequenceError, Escape, NotFoundError
from .._helpers import always
from .._types import Predicate
from ..core import Seq


def for_all[T](seq: Seq[T], predicate: Predicate[T]) -> bool:
    """Do all elements satisfy the predicate? Stops at the first failure."""
    holds = True

    with Escape() as stop:

        def step(x: T) -> None:
            nonlocal holds
            if not predicate(x):
                holds = False
                raise stop

        seq(step)

    return holds


def exists[T](seq: Seq[T], predicate: Predicate[T]) -> bool:
    """Does some element satisfy the predicate? Stops at the first match."""
    found = False

    with Escape() as stop:

        def step(x: T) -> None:
            nonlocal found
            if predicate(x):
                found = True
                raise stop

        seq(step)

    return found


def find[T](seq: Seq[T], predicate: Predicate[T]) -> Result[T, NotFoundError]:
    """First element satisfying the predicate, or Error(NotFoundError())."""
    found: list[T] = []

    with Escape() as stop:

        def step(x: T) -> None:
            if predicate(x):
                found.append(x)
                raise stop

        seq(step)

    if found:
        return Ok(found[0])
    return Error(NotFoundError())


def head[T](seq: Seq[T]) -> Result[T, EmptySequenceError]:
    """First element, or Error(EmptySequenceError()) for an empty sequence."""
    match find(seq, always):
        case Ok(x):
            return Ok(x)
        case _:
            return Error(EmptySequenceError())


__all__ = ("exists", "find", "for_all", "head")
