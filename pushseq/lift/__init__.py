"""
Container adapters with semantic namespaces.

Supports the same import styles as the rest of the library:
    from pushseq import lift as L   # Recommended
    from pushseq import lift

Architecture:
- L.up.*    - container -> Seq (подъем контейнера в последовательность)
- L.down.*  - Seq -> container (опускание последовательности в контейнер)

Examples:
    from pushseq import lift as L

    seq = L.up.of_list([1, 2, 3])
    chars = L.up.of_str("abc")
    table = L.down.to_hashtbl(L.up.of_list([(1, "a"), (1, "b")]))  # {1: "b"}
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# Most common functions in root for easy access
from .down import (
    hashtbl_add,
    hashtbl_keep,
    hashtbl_replace,
    to_array,
    to_hashtbl,
    to_list,
    to_queue,
    to_rev_list,
    to_stack,
    to_str,
)
from .up import (
    ChannelPolicy,
    array_slice,
    hashtbl_keys,
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
)

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "ChannelPolicy",
    "array_slice",
    "hashtbl_keys",
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
    # Down
    "hashtbl_add",
    "hashtbl_keep",
    "hashtbl_replace",
    "to_array",
    "to_hashtbl",
    "to_list",
    "to_queue",
    "to_rev_list",
    "to_stack",
    "to_str",
)
