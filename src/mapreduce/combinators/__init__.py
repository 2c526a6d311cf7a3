"""Combinators - map, filter, fold and join over finite sequences."""

from .laws import (
    fold_is_left_fold,
    join_is_complete,
    join_matches_simple_join,
    map_preserves_shape,
    where_is_subsequence,
)
from .ops import fold, join, simple_join, transform, where

__all__ = [
    "transform",
    "where",
    "fold",
    "simple_join",
    "join",
    # Laws
    "map_preserves_shape",
    "where_is_subsequence",
    "fold_is_left_fold",
    "join_matches_simple_join",
    "join_is_complete",
]
