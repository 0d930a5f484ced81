"""
WriterResult - outcome of one fold_w step (or of the whole fold)
================================================================
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    kungfu Result plus the log written while producing it.

    A fold_w step returns one to say how the accumulator moves on (Ok) or
    why the traversal stops (Error). fold_w itself returns one holding the
    final accumulator, or the first Error, next to every entry written up
    to that point.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("_result", "_log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> W:
        return self._log

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


def written[T, W](value: T, *entries: W) -> WriterResult[T, typing.Never, Log[W]]:
    """Step result: continue with `value`, recording `entries`."""
    return WriterResult(Ok(value), Log.of(*entries))


def written_error[E, W](error: E, *entries: W) -> WriterResult[typing.Never, E, Log[W]]:
    """Step result: stop the fold with `error`, recording `entries` first."""
    return WriterResult(Error(error), Log.of(*entries))


__all__ = ("WriterResult", "written", "written_error")
