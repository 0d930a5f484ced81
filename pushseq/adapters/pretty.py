"""Pretty printing of sequences"""

from __future__ import annotations

import io
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._types import Formatter
from ..core import Seq


class TextSink(typing.Protocol):
    def write(self, s: str, /) -> typing.Any: ...


@dataclass(frozen=True, slots=True)
class PrettyPolicy:
    """Separator between elements, plus optional text around the whole."""

    sep: str = ""
    start: str = ""
    stop: str = ""


def pp_seq[O: TextSink, T](
    out: O,
    seq: Seq[T],
    fmt: Formatter[O, T],
    *,
    policy: PrettyPolicy = PrettyPolicy(),
) -> None:
    """
    Print every element with `fmt`, `policy.sep` between elements.

    Example:
        pp_seq(sys.stdout, int_range(1, 3), lambda o, x: o.write(str(x)),
               policy=PrettyPolicy(sep=", "))   # 1, 2, 3
    """
    first = True

    def step(x: T) -> None:
        nonlocal first
        if first:
            first = False
        else:
            out.write(policy.sep)
        fmt(out, x)

    out.write(policy.start)
    seq(step)
    out.write(policy.stop)


def show[T](seq: Seq[T], fmt: Callable[[T], str] = repr, *, sep: str = ", ") -> str:
    """Render a sequence as a string."""
    buffer = io.StringIO()
    pp_seq(buffer, seq, lambda out, x: out.write(fmt(x)), policy=PrettyPolicy(sep=sep))
    return buffer.getvalue()


__all__ = ("PrettyPolicy", "TextSink", "pp_seq", "show")
