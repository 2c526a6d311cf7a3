"""Combinator primitives: transform, where, fold, simple_join, join."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mapreduce.kernel.types import Combiner, JoinCondition, Pair, Predicate, T, Transform, U

logger = logging.getLogger(__name__)


def transform(items: Iterable[T], fn: Transform[T, U]) -> list[U]:
    """Apply a function to every item.

    Semantics:
        - One output per input, same order
        - The input is not modified
        - An exception from fn propagates as-is and discards the partial output

    Args:
        items: The input sequence.
        fn: Pure function applied to each item.

    Returns:
        list[U]: A new list with fn(item) for each item.
    """
    result: list[U] = []
    for item in items:
        result.append(fn(item))

    logger.debug("transform: %d items", len(result))
    return result


def where(items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    """Keep the items for which predicate holds, in their original order.

    Args:
        items: The input sequence.
        predicate: Pure function deciding whether an item is kept.

    Returns:
        list[T]: A new list, never longer than the input.
    """
    result: list[T] = []
    seen = 0
    for item in items:
        seen += 1
        if predicate(item):
            result.append(item)

    logger.debug("where: kept %d of %d items", len(result), seen)
    return result


def fold(items: Iterable[T], seed: U, combiner: Combiner[U, T]) -> U:
    """Left fold: combiner(...combiner(combiner(seed, e0), e1)..., en).

    Items are combined strictly in sequence order since the combiner
    is not assumed to be associative or commutative. An empty input
    returns seed itself.

    Args:
        items: The input sequence.
        seed: Initial accumulator value.
        combiner: Function (accumulator, item) -> accumulator.

    Returns:
        U: The final accumulator.
    """
    acc = seed
    count = 0
    for item in items:
        acc = combiner(acc, item)
        count += 1

    logger.debug("fold: %d items", count)
    return acc


def simple_join(
    left: Iterable[T],
    right: Iterable[U],
    condition: JoinCondition[T, U],
) -> list[Pair[T, U]]:
    """Nested-loop inner join.

    Semantics:
        - For each left item, for each right item, emit Pair(l, r) if condition(l, r)
        - Left-major, right-minor order
        - Exactly len(left) * len(right) condition calls
        - No deduplication; unmatched items contribute nothing

    Args:
        left: The outer sequence.
        right: The inner sequence, traversed once per left item.
        condition: Pure predicate over one left and one right item.

    Returns:
        list[Pair[T, U]]: All matching pairs.
    """
    right_rows = tuple(right)
    combinations: list[Pair[T, U]] = []
    left_count = 0
    for left_item in left:
        left_count += 1
        for right_item in right_rows:
            if condition(left_item, right_item):
                combinations.append(Pair(left_item, right_item))

    logger.debug(
        "simple_join: %d x %d rows -> %d pairs", left_count, len(right_rows), len(combinations)
    )
    return combinations


def join(
    left: Iterable[T],
    right: Iterable[U],
    condition: JoinCondition[T, U],
) -> list[Pair[T, U]]:
    """Inner join expressed as two nested folds.

    The outer fold walks the left sequence with an empty result as seed.
    For each left row an inner fold walks the right sequence, collecting
    the matching pairs for that row, which are then appended to the
    outer accumulator. Produces exactly the same list as simple_join.

    Args:
        left: The outer sequence.
        right: The inner sequence, traversed once per left item.
        condition: Pure predicate over one left and one right item.

    Returns:
        list[Pair[T, U]]: All matching pairs, left-major order.
    """
    right_rows = tuple(right)
    left_count = 0

    def join_row(joined: list[Pair[T, U]], left_row: T) -> list[Pair[T, U]]:
        nonlocal left_count
        left_count += 1

        def collect(row_pairs: list[Pair[T, U]], right_row: U) -> list[Pair[T, U]]:
            if condition(left_row, right_row):
                row_pairs.append(Pair(left_row, right_row))
            return row_pairs

        # Fresh seed per left row; accumulators never escape this call
        joined.extend(fold(right_rows, [], collect))
        return joined

    combinations = fold(left, [], join_row)

    logger.debug("join: %d x %d rows -> %d pairs", left_count, len(right_rows), len(combinations))
    return combinations
