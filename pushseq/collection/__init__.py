from ..lift.down import to_array, to_list, to_rev_list
from .fold import fold, fold_result, fold_w
from .quantify import exists, find, for_all, head
from .reduce import is_empty, iter, iteri, length
from .traverse import traverse

__all__ = (
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
    "to_array",
    "to_list",
    "to_rev_list",
    "traverse",
)
