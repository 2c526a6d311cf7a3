"""Combinator laws as executable checks.

The operators satisfy the following algebraic laws:

1. Map preserves shape: len(transform(s, f)) == len(s)
   and transform(s, f)[i] == f(s[i])

2. Where is a sub-selection: where(s, p) is exactly the subsequence
   of s whose items satisfy p, in original order

3. Fold is a left fold: fold([e0, ..., en], seed, f) == f(...f(f(seed, e0), e1)..., en)
   and fold([], seed, f) is seed

4. Join is SimpleJoin: join(l, r, c) == simple_join(l, r, c), order included

5. Join is complete: exactly one pair per (a, b) with c(a, b), none otherwise
"""

from __future__ import annotations

from collections.abc import Sequence

from mapreduce.combinators.ops import fold, join, simple_join, transform, where
from mapreduce.kernel.types import Combiner, JoinCondition, Pair, Predicate, T, Transform, U


def map_preserves_shape(items: Sequence[T], fn: Transform[T, U]) -> bool:
    mapped = transform(items, fn)
    if len(mapped) != len(items):
        return False
    return all(mapped[i] == fn(items[i]) for i in range(len(items)))


def where_is_subsequence(items: Sequence[T], predicate: Predicate[T]) -> bool:
    selected = where(items, predicate)
    if len(selected) > len(items):
        return False

    # Walk the input once, matching selected items in order
    position = 0
    for item in items:
        if predicate(item):
            if position >= len(selected) or selected[position] != item:
                return False
            position += 1
    return position == len(selected)


def fold_is_left_fold(items: Sequence[T], seed: U, combiner: Combiner[U, T]) -> bool:
    expected = seed
    for i in range(len(items)):
        expected = combiner(expected, items[i])
    return fold(items, seed, combiner) == expected


def join_matches_simple_join(
    left: Sequence[T],
    right: Sequence[U],
    condition: JoinCondition[T, U],
) -> bool:
    return join(left, right, condition) == simple_join(left, right, condition)


def join_is_complete(
    left: Sequence[T],
    right: Sequence[U],
    condition: JoinCondition[T, U],
) -> bool:
    expected = [
        Pair(left[i], right[j])
        for i in range(len(left))
        for j in range(len(right))
        if condition(left[i], right[j])
    ]
    return join(left, right, condition) == expected
