"""Traverse combinator

Map with a fallible handler, collecting all results or the first Error."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._errors import Escape
from ..core import Seq


def traverse[T, U, E](seq: Seq[T], handler: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """
    Apply `handler` to every element; Ok(list) if all succeed.

    Stops the traversal at the first Error and returns it.

    Example:
        def parse(s: str) -> Result[int, str]:
            return Ok(int(s)) if s.isdigit() else Error(s)

        traverse(of_list(["1", "2"]), parse)   # Ok([1, 2])
        traverse(of_list(["1", "x"]), parse)   # Error("x")
    """
    values: list[U] = []
    failure: Result[list[U], E] | None = None

    with Escape() as stop:

        def step(x: T) -> None:
            nonlocal failure
            match handler(x):
                case Ok(value):
                    values.append(value)
                case Error(e):
                    failure = Error(e)
                    raise stop

        seq(step)

    if failure is not None:
        return failure
    return Ok(values)


__all__ = ("traverse",)
