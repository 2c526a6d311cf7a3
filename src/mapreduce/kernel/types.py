"""Core value types and callable signatures - pure and dependency-free."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Transform = Callable[[T], U]
Predicate = Callable[[T], bool]
Combiner = Callable[[U, T], U]
JoinCondition = Callable[[T, U], bool]


@dataclass(frozen=True)
class Pair(Generic[T, U]):
    """
    One joined row.

    Attributes:
        left: Element drawn from the left sequence
        right: Element drawn from the right sequence
    """

    left: T
    right: U

    def __iter__(self) -> Iterator[Any]:
        yield self.left
        yield self.right

    def __str__(self) -> str:
        return f"({self.left}, {self.right})"
