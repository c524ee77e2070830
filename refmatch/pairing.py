"""
Refactoring pairs and their ranking order.

A refactoring pair binds a deleted candidate, an inserted candidate and
the similarity between them. Pairs rank by descending similarity so the
most similar pair is consumed first. The candidates are opaque: nothing
here reads or changes them, and nothing here validates the score.

The order lives in ``compare_pairs`` and its key ``descending_similarity``.
Pairs themselves compare and hash by identity, so two distinct pairs
with the same score are always two entries in a set or dict.
"""

import functools
import math
from dataclasses import dataclass
from typing import Generic, Iterable, List, TypeVar

C = TypeVar("C")


@dataclass(frozen=True, eq=False)
class RefactoringPair(Generic[C]):
    """A deleted and an inserted candidate plus their similarity."""

    deleted_entity: C
    inserted_entity: C
    similarity: float


def create_pair(deleted_entity: C, inserted_entity: C, similarity: float) -> RefactoringPair[C]:
    """Build a pair, keeping all three values exactly as given."""
    return RefactoringPair(deleted_entity, inserted_entity, similarity)


def compare_similarity(x: float, y: float) -> int:
    """
    Ascending three-way comparison of two scores.

    Follows the IEEE 754 total order: -0.0 sorts below 0.0, and NaN sorts
    above every number (including infinity) while comparing equal to
    itself. This keeps the order consistent for sorted containers even
    when a score is NaN.

    Returns:
        -1, 0 or 1
    """
    if x < y:
        return -1
    if x > y:
        return 1

    x_nan = _is_nan(x)
    y_nan = _is_nan(y)
    if x_nan or y_nan:
        return int(x_nan) - int(y_nan)

    # x == y here; only the sign of zero can still differ
    return int(_is_negative_zero(y)) - int(_is_negative_zero(x))


# Only floats carry NaN or a signed zero. Ints are never converted, so
# ints too large for a float still compare.
def _is_nan(value: float) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_negative_zero(value: float) -> bool:
    return isinstance(value, float) and value == 0 and math.copysign(1.0, value) < 0


def compare_pairs(a: RefactoringPair, b: RefactoringPair) -> int:
    """
    Three-way comparison ranking the more similar pair first.

    Pairs with equal similarity compare as 0 whatever candidates they
    carry; there is no secondary key.
    """
    return -compare_similarity(a.similarity, b.similarity)


descending_similarity = functools.cmp_to_key(compare_pairs)


def sort_pairs(pairs: Iterable[RefactoringPair]) -> List[RefactoringPair]:
    """
    Return pairs ordered by non-increasing similarity.

    The sort is stable: pairs with tied similarity keep their input order
    and every pair is kept.
    """
    return sorted(pairs, key=descending_similarity)
