"""
Push-based lazy sequences for moving data between containers.

A sequence is not a data structure but a reusable traversal procedure:
given a consumer callback it drives the callback over every element and
returns. Combinators wrap traversals by closure capture, so nothing is
materialized until a reduction runs the pipeline.

Architecture:
- core: Seq[T], from_iter, run, empty, singleton
- transform / control: combinators (map, filter, take, drop, rev, append,
  concat, repeat, cycle, ...)
- collection: reductions (fold, iter, length, for_all, exists, ...)
- lift: container adapters (L.up.* builds, L.down.* materializes)
- adapters: ordered set/map enrichment, pretty printing
- writer: Log accumulator for fold_w
"""

# Core types
from ._types import Compare, Consumer, Predicate, Traversal
from ._errors import EmptySequenceError, NotFoundError, NotRestartableError
from .core import EMPTY, Seq, empty, from_iter, run, singleton

# Container adapters
from . import lift
from .lift import (
    ChannelPolicy,
    array_slice,
    hashtbl_add,
    hashtbl_keep,
    hashtbl_keys,
    hashtbl_replace,
    hashtbl_values,
    int_range,
    of_array,
    of_hashtbl,
    of_in_channel,
    of_iterator,
    of_list,
    of_queue,
    of_stack,
    of_str,
    to_array,
    to_hashtbl,
    to_list,
    to_queue,
    to_rev_list,
    to_stack,
    to_str,
)

# Writer
from . import writer
from .writer import Log, WriterResult, written, written_error

# Transform
from .transform import drop, filter, map, rev, take, tap

# Control
from .control import append, append_all, concat, cycle, flat_map, repeat

# Reductions
from .collection import (
    exists,
    find,
    fold,
    fold_result,
    fold_w,
    for_all,
    head,
    is_empty,
    iter,
    iteri,
    length,
    traverse,
)

# Ordered containers / pretty printing
from .adapters import (
    MapAdapter,
    OrderedMap,
    OrderedSet,
    PrettyPolicy,
    SetAdapter,
    adapt_map,
    adapt_set,
    make_map,
    make_set,
    of_set,
    pp_seq,
    show,
    to_set,
)

__all__ = (
    # Core types
    "Compare",
    "Consumer",
    "Predicate",
    "Traversal",
    "EMPTY",
    "Seq",
    "empty",
    "from_iter",
    "run",
    "singleton",
    # Errors
    "EmptySequenceError",
    "NotFoundError",
    "NotRestartableError",
    # Lift
    "lift",
    "ChannelPolicy",
    "array_slice",
    "hashtbl_add",
    "hashtbl_keep",
    "hashtbl_keys",
    "hashtbl_replace",
    "hashtbl_values",
    "int_range",
    "of_array",
    "of_hashtbl",
    "of_in_channel",
    "of_iterator",
    "of_list",
    "of_queue",
    "of_stack",
    "of_str",
    "to_array",
    "to_hashtbl",
    "to_list",
    "to_queue",
    "to_rev_list",
    "to_stack",
    "to_str",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    "written",
    "written_error",
    # Transform
    "drop",
    "filter",
    "map",
    "rev",
    "take",
    "tap",
    # Control
    "append",
    "append_all",
    "concat",
    "cycle",
    "flat_map",
    "repeat",
    # Reductions
    "exists",
    "find",
    "fold",
    "fold_result",
    "fold_w",
    "for_all",
    "head",
    "is_empty",
    "iter",
    "iteri",
    "length",
    "traverse",
    # Adapters
    "MapAdapter",
    "OrderedMap",
    "OrderedSet",
    "PrettyPolicy",
    "SetAdapter",
    "adapt_map",
    "adapt_set",
    "make_map",
    "make_set",
    "of_set",
    "pp_seq",
    "show",
    "to_set",
)
