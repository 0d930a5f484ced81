from __future__ import annotations

import typing


class Escape(BaseException):
    """
    Unwinds a traversal back to the reduction that started it.

    Every early-terminating operation creates its own instance and uses it
    as the scope that catches it:

        with Escape() as stop:
            seq(step)          # step() may `raise stop`

    Only the very same instance is swallowed; an escape raised by an outer
    scope passes through untouched.
    """

    def __enter__(self) -> typing.Self:
        return self

    def __exit__(self, exc_type: object, exc: BaseException | None, tb: object) -> bool:
        return exc is self


class NotRestartableError(ValueError):
    """A single-pass sequence was given to an operation that reruns it."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() requires a restartable sequence")


class EmptySequenceError(Exception):
    """Sequence produced no element."""

    def __init__(self) -> None:
        super().__init__("Sequence is empty")


class NotFoundError(Exception):
    """No element satisfied the predicate."""

    def __init__(self) -> None:
        super().__init__("No element satisfies the predicate")


__all__ = ("EmptySequenceError", "Escape", "NotFoundError", "NotRestartableError")
