"""
Core type definitions for pushseq.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Consumer = callback invoked once per element
type Consumer[T] = Callable[[T], None]

# Traversal = procedure that drives a consumer over every element
type Traversal[T] = Callable[[Consumer[T]], None]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Compare = three-way comparison: negative, zero or positive
type Compare[T] = Callable[[T, T], int]

# Formatter = writes one element to an output stream
# NOTE: Первый аргумент - любой объект с методом write(str).
type Formatter[O, T] = Callable[[O, T], None]

__all__ = (
    "Consumer",
    "Traversal",
    "Predicate",
    "Compare",
    "Formatter",
)
