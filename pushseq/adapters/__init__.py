from .ordered import (
    MapAdapter,
    OrderedMap,
    OrderedSet,
    SetAdapter,
    adapt_map,
    adapt_set,
    make_map,
    make_set,
    of_set,
    to_set,
)
from .pretty import PrettyPolicy, pp_seq, show

__all__ = (
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
