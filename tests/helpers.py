from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from pushseq import Seq, from_iter


class Boom(Exception):
    pass


def strict(xs: list[int], limit: int) -> Seq[int]:
    """Sequence over xs that fails if more than `limit` elements are pulled."""

    def traverse(k: Callable[[int], None]) -> None:
        for count, x in enumerate(xs, start=1):
            if count > limit:
                raise Boom(f"traversed past element {limit}")
            k(x)

    return from_iter(traverse)


def ok_value[T](result: Result[T, object]) -> T:
    match result:
        case Ok(value):
            return value
        case _:
            raise AssertionError(f"expected Ok, got {result!r}")


def error_value[E](result: Result[object, E]) -> E:
    match result:
        case Error(error):
            return error
        case _:
            raise AssertionError(f"expected Error, got {result!r}")
