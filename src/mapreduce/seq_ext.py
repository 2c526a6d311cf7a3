"""Seq extensions for the combinator primitives."""

from collections.abc import Iterable
from typing import Any, TextIO

from mapreduce.combinators.ops import fold, join, simple_join, transform, where
from mapreduce.config import DisplayConfig
from mapreduce.display import print_list
from mapreduce.kernel.seq import Seq
from mapreduce.kernel.types import Combiner, JoinCondition, Predicate, Transform


def seq_map(self: Seq, fn: Transform) -> Seq:
    """Map the sequence into a new Seq.

    Args:
        fn: Pure function applied to each item

    Returns:
        New Seq with fn(item) for each item, same order

    Example:
        >>> Seq.of(0, 2, 4).map(lambda x: x * 2)
        Seq(items=(0, 4, 8))
    """
    return Seq.from_iterable(transform(self, fn))


def seq_where(self: Seq, predicate: Predicate) -> Seq:
    """Keep the items for which predicate holds.

    Args:
        predicate: Pure function deciding whether an item is kept

    Returns:
        New Seq with the kept items in their original order
    """
    return Seq.from_iterable(where(self, predicate))


def seq_reduce(self: Seq, seed: Any, combiner: Combiner) -> Any:
    """Fold the sequence left to right into a single value.

    Args:
        seed: Initial accumulator value
        combiner: Function (accumulator, item) -> accumulator

    Returns:
        The final accumulator, or seed for an empty Seq
    """
    return fold(self, seed, combiner)


def seq_simple_join(self: Seq, right: Iterable[Any], condition: JoinCondition) -> Seq:
    """Nested-loop inner join with this Seq as the left side.

    Args:
        right: The inner sequence
        condition: Pure predicate over one left and one right item

    Returns:
        New Seq of matching Pairs, left-major order
    """
    return Seq.from_iterable(simple_join(self, right, condition))


def seq_join(self: Seq, right: Iterable[Any], condition: JoinCondition) -> Seq:
    """Inner join built from two nested folds; same result as simple_join.

    Args:
        right: The inner sequence
        condition: Pure predicate over one left and one right item

    Returns:
        New Seq of matching Pairs, left-major order
    """
    return Seq.from_iterable(join(self, right, condition))


def seq_print_list(self: Seq, config: DisplayConfig | None = None, file: TextIO | None = None) -> None:
    """Print the Seq as "index => item" lines between separators.

    Args:
        config: Rendering options, defaults to DisplayConfig()
        file: Output stream, defaults to sys.stdout
    """
    print_list(self, config=config, file=file)


# Register the operations
Seq.register_op("map", seq_map)
Seq.register_op("where", seq_where)
Seq.register_op("reduce", seq_reduce)
Seq.register_op("simple_join", seq_simple_join)
Seq.register_op("join", seq_join)
Seq.register_op("print_list", seq_print_list)
