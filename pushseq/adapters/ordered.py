"""
Ordered set / map adapters
==========================

Sequence conversions for ordered containers, parameterized by comparison.

Architecture:
- OrderedSet[T] / OrderedMap[K, V] - persistent AVL trees over a three-way
  comparator: O(log n) add and lookup, older versions stay valid
- SetAdapter / MapAdapter - typeclass records: the container's own
  empty/add/iteration plus of_seq/to_seq built on top
- make_* builds an adapter over OrderedSet/OrderedMap for a comparator,
  adapt_* wraps any existing container type

Example:
    ints = make_set(lambda a, b: a - b)
    s = ints.of_seq(of_list([3, 1, 2, 1]))
    ints.to_seq(s).to_list()  # [1, 2, 3]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .._types import Compare, Consumer
from ..collection.fold import fold
from ..core import Seq
from . import _tree


# ============================================================================
# Persistent sorted containers
# ============================================================================


class OrderedSet[T]:
    """
    Persistent set ordered by `compare`.

    `add` returns a new set sharing structure with the old one; elements
    comparing equal (compare == 0) are stored once, the first one added is
    kept.
    """

    __slots__ = ("_compare", "_root")

    def __init__(self, compare: Compare[T], items: Iterable[T] = (), /) -> None:
        self._compare = compare
        self._root: _tree.Node[T, None] | None = None
        for x in items:
            self._root = _tree.insert(self._root, x, None, compare, replace=False)

    def add(self, x: T, /) -> OrderedSet[T]:
        root = _tree.insert(self._root, x, None, self._compare, replace=False)
        if root is self._root:
            return self
        result: OrderedSet[T] = OrderedSet(self._compare)
        result._root = root
        return result

    def mem(self, x: T, /) -> bool:
        return _tree.lookup(self._root, x, self._compare) is not None

    def __contains__(self, x: object) -> bool:
        return self.mem(x)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return (node.key for node in _tree.walk(self._root))

    def __len__(self) -> int:
        return _tree.size(self._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return len(self) == len(other) and all(
            self._compare(a, b) == 0 for a, b in zip(self, other)
        )

    def __repr__(self) -> str:
        return f"OrderedSet({list(self)!r})"


class OrderedMap[K, V]:
    """Persistent map ordered by `compare` on keys. A later add replaces."""

    __slots__ = ("_compare", "_root")

    def __init__(self, compare: Compare[K], /) -> None:
        self._compare = compare
        self._root: _tree.Node[K, V] | None = None

    def add(self, key: K, value: V, /) -> OrderedMap[K, V]:
        result: OrderedMap[K, V] = OrderedMap(self._compare)
        result._root = _tree.insert(self._root, key, value, self._compare, replace=True)
        return result

    def find(self, key: K, /) -> V:
        node = _tree.lookup(self._root, key, self._compare)
        if node is None:
            raise KeyError(key)
        return node.value

    def __getitem__(self, key: K) -> V:
        return self.find(key)

    def __contains__(self, key: object) -> bool:
        return _tree.lookup(self._root, key, self._compare) is not None  # type: ignore[arg-type]

    def items(self) -> Iterator[tuple[K, V]]:
        return ((node.key, node.value) for node in _tree.walk(self._root))

    def __len__(self) -> int:
        return _tree.size(self._root)

    def __repr__(self) -> str:
        return f"OrderedMap({dict(self.items())!r})"


# ============================================================================
# Adapters
# ============================================================================


@dataclass(frozen=True, slots=True)
class SetAdapter[T, S]:
    """
    Sequence conversions for a set type S with elements T.

    - empty: make an empty set
    - add: persistent insert, returns the new set
    - members: iterate the set in its own order
    """

    empty: Callable[[], S]
    add: Callable[[S, T], S]
    members: Callable[[S], Iterable[T]]

    def of_seq(self, seq: Seq[T]) -> S:
        return fold(seq, self.add, initial=self.empty())

    def to_seq(self, s: S) -> Seq[T]:
        def traverse(k: Consumer[T]) -> None:
            for x in self.members(s):
                k(x)

        return Seq(traverse)


@dataclass(frozen=True, slots=True)
class MapAdapter[K, V, M]:
    """Sequence conversions for a map type M from K to V."""

    empty: Callable[[], M]
    add: Callable[[M, K, V], M]
    items: Callable[[M], Iterable[tuple[K, V]]]

    def of_seq(self, seq: Seq[tuple[K, V]]) -> M:
        return fold(seq, lambda m, kv: self.add(m, kv[0], kv[1]), initial=self.empty())

    def to_seq(self, m: M) -> Seq[tuple[K, V]]:
        def traverse(k: Consumer[tuple[K, V]]) -> None:
            for kv in self.items(m):
                k(kv)

        return Seq(traverse)

    def keys(self, m: M) -> Seq[K]:
        return self.to_seq(m).map(lambda kv: kv[0])

    def values(self, m: M) -> Seq[V]:
        return self.to_seq(m).map(lambda kv: kv[1])


def adapt_set[T, S](
    *,
    empty: Callable[[], S],
    add: Callable[[S, T], S],
    members: Callable[[S], Iterable[T]],
) -> SetAdapter[T, S]:
    """
    Make an existing set type sequence-aware.

    Example:
        frozensets = adapt_set(empty=frozenset, add=lambda s, x: s | {x}, members=sorted)
    """
    return SetAdapter(empty=empty, add=add, members=members)


def make_set[T](compare: Compare[T]) -> SetAdapter[T, OrderedSet[T]]:
    """Adapter over OrderedSet for the given comparator."""
    return SetAdapter(
        empty=lambda: OrderedSet(compare),
        add=OrderedSet.add,
        members=iter,
    )


def adapt_map[K, V, M](
    *,
    empty: Callable[[], M],
    add: Callable[[M, K, V], M],
    items: Callable[[M], Iterable[tuple[K, V]]],
) -> MapAdapter[K, V, M]:
    """Make an existing map type sequence-aware."""
    return MapAdapter(empty=empty, add=add, items=items)


def make_map[K, V](compare: Compare[K]) -> MapAdapter[K, V, OrderedMap[K, V]]:
    """Adapter over OrderedMap for the given key comparator."""
    return MapAdapter(
        empty=lambda: OrderedMap(compare),
        add=OrderedMap.add,
        items=OrderedMap.items,
    )


def of_set[T, S](adapter: SetAdapter[T, S], s: S) -> Seq[T]:
    """Sequence of the set's members, through the adapter."""
    return adapter.to_seq(s)


def to_set[T, S](adapter: SetAdapter[T, S], seq: Seq[T]) -> S:
    """Build a set from the sequence, through the adapter."""
    return adapter.of_seq(seq)


__all__ = (
    "MapAdapter",
    "OrderedMap",
    "OrderedSet",
    "SetAdapter",
    "adapt_map",
    "adapt_set",
    "make_map",
    "make_set",
    "of_set",
    "to_set",
)
