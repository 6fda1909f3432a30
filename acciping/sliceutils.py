"""Helpers over sequences."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def one_of(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if any item satisfies ``predicate``."""
    return any(predicate(item) for item in items)


def all_of(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if every item satisfies ``predicate``."""
    return all(predicate(item) for item in items)


def fold(items: Iterable[T], base: U, func: Callable[[T, U], U]) -> U:
    """Left fold where ``func`` receives ``(item, accumulator)``."""
    result = base
    for item in items:
        result = func(item, result)
    return result


def shuffled(items: Iterable[T]) -> list[T]:
    """Return a shuffled copy of ``items``."""
    result = list(items)
    random.shuffle(result)
    return result


def join(items: Iterable[object], separator: str) -> str:
    """Join the string forms of ``items`` with ``separator``."""
    return separator.join(str(item) for item in items)