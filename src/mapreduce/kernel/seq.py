"""Seq - immutable sequence wrapper with registrable fluent operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")


# Operation registry - class-level storage for Seq methods
_ops_registry: dict[str, Callable[..., Any]] = {}


@dataclass(frozen=True)
class Seq(Generic[T]):
    """An ordered, finite, materialized sequence.

    Operations are attached via register_op() so that calls read
    left-to-right: Seq.of(1, 2, 3).map(f).where(p).
    """

    items: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        # Frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation on the Seq class.

        Args:
            name: The method name (e.g., "map")
            fn: Function taking the Seq as its first argument
        """
        _ops_registry[name] = fn

    @staticmethod
    def of(*items: T) -> Seq[T]:
        return Seq(items=items)

    @staticmethod
    def from_iterable(items: Iterable[T]) -> Seq[T]:
        return Seq(items=tuple(items))

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered operations."""
        if name in _ops_registry:
            fn = _ops_registry[name]
            # Bind the function to this instance
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Seq[T]: ...

    def __getitem__(self, index: int | slice) -> T | Seq[T]:
        if isinstance(index, slice):
            return Seq(items=self.items[index])
        return self.items[index]

    def to_list(self) -> list[T]:
        return list(self.items)
