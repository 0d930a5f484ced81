"""
Writer
======

Аккумуляция логов рядом с результатом свёртки:
- Log[A] - моноидный список записей
- WriterResult[T, E, W] - kungfu Result + накопленный лог

Used by fold_w to thread a log through a traversal.
"""

from .log import Log
from .result import WriterResult, written, written_error

__all__ = (
    "Log",
    "WriterResult",
    "written",
    "written_error",
)
