from .combine import append, append_all, concat, flat_map
from .repeat import cycle, repeat

__all__ = (
    "append",
    "append_all",
    "concat",
    "cycle",
    "flat_map",
    "repeat",
)
