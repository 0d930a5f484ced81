"""
Fold combinators
================

Pure fold plus two fallible variants that stop at the first Error:
- fold_result: step returns kungfu Result
- fold_w: step returns WriterResult, logs are merged
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._errors import Escape
from ..core import Seq
from ..writer import Log, WriterResult


def fold[A, T](seq: Seq[T], f: Callable[[A, T], A], *, initial: A) -> A:
    """
    Thread an accumulator through every element, in traversal order.

    Example:
        of_list([1, 2, 3]).fold(lambda acc, x: acc + x, initial=0)  # 6
    """
    acc = initial

    def step(x: T) -> None:
        nonlocal acc
        acc = f(acc, x)

    seq(step)
    return acc


def fold_result[A, T, E](
    seq: Seq[T],
    f: Callable[[A, T], Result[A, E]],
    *,
    initial: A,
) -> Result[A, E]:
    """Fallible fold: stop the traversal at the first Error and return it."""
    acc = initial
    failure: Result[A, E] | None = None

    with Escape() as stop:

        def step(x: T) -> None:
            nonlocal acc, failure
            match f(acc, x):
                case Ok(new_acc):
                    acc = new_acc
                case Error(e):
                    failure = Error(e)
                    raise stop

        seq(step)

    if failure is not None:
        return failure
    return Ok(acc)


def fold_w[A, T, E, W](
    seq: Seq[T],
    f: Callable[[A, T], WriterResult[A, E, Log[W]]],
    *,
    initial: A,
) -> WriterResult[A, E, Log[W]]:
    """Fallible fold with log merging. On Error the log gathered so far is kept."""
    acc = initial
    merged_log = Log[W]()
    failure: Result[A, E] | None = None

    with Escape() as stop:

        def step(x: T) -> None:
            nonlocal acc, failure
            wr = f(acc, x)
            merged_log.extend(wr.log)
            match wr.result:
                case Ok(new_acc):
                    acc = new_acc
                case Error(e):
                    failure = Error(e)
                    raise stop

        seq(step)

    if failure is not None:
        return WriterResult(failure, merged_log)
    return WriterResult(Ok(acc), merged_log)


__all__ = ("fold", "fold_result", "fold_w")
