"""Kernel layer - pure value types for mapreduce."""

from mapreduce.kernel.seq import Seq
from mapreduce.kernel.types import Combiner, JoinCondition, Pair, Predicate, Transform

__all__ = [
    "Seq",
    "Pair",
    # Callable signatures
    "Transform",
    "Predicate",
    "Combiner",
    "JoinCondition",
]
