from .effects import tap
from .map import filter, map
from .order import rev
from .slice import drop, take

__all__ = (
    "drop",
    "filter",
    "map",
    "rev",
    "take",
    "tap",
)
