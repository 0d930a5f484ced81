"""Internal helpers for pushseq.

Small functions shared by several combinator modules.
Not part of the public API."""

from __future__ import annotations

from collections.abc import Iterable


def always(_: object) -> bool:
    """Predicate that accepts every element."""
    return True


def all_restartable(seqs: Iterable[object]) -> bool:
    """True if every given sequence carries the restartable tag."""
    return all(getattr(s, "restartable", True) for s in seqs)


__all__ = (
    "always",
    "all_restartable",
)
