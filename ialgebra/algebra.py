"""Classification of two intervals into a single Allen relation.

The decision table is evaluated top to bottom and the first match wins. The
early rules settle touching boundaries and single-point intervals; the later
ones are the classical non-degenerate cases. Reordering the rules changes
the answer for point intervals sitting on another interval's endpoint.
"""

import logging
from typing import TYPE_CHECKING, Any

from ialgebra.ordering import Ordering
from ialgebra.relation import Relation

if TYPE_CHECKING:
    from ialgebra.interval import Interval

logger = logging.getLogger(__name__)

LT = Ordering.LESS
EQ = Ordering.EQUAL
GT = Ordering.GREATER


class UnknownRelationError(ValueError):
    """Raised in strict mode when no rule of the decision table matches."""

    def __init__(self, left: "Interval[Any]", right: "Interval[Any]"):
        self.left: "Interval[Any]" = left
        self.right: "Interval[Any]" = right
        super().__init__(
            f"Could not relate {left} to {right}.\n"
            f"Hint: the comparator is not a consistent total order "
            f"(e.g. it orders NaN or has hidden state)."
        )


class MixedComparatorError(ValueError):
    """Raised in strict mode when two intervals carry different comparators."""

    def __init__(self, left: "Interval[Any]", right: "Interval[Any]"):
        self.left: "Interval[Any]" = left
        self.right: "Interval[Any]" = right
        super().__init__(
            f"Cannot relate {left} to {right}: built with different comparators "
            f"({_name(left.cmp)} vs {_name(right.cmp)}).\n"
            f"Hint: build both intervals with the same comparator object:\n"
            f"  order = by_key(len)\n"
            f"  relate(make_interval(a, b, order), make_interval(c, d, order))"
        )


def _name(cmp: Any) -> str:
    return getattr(cmp, "__qualname__", repr(cmp))


def _classify(lxly: Ordering, lxgy: Ordering, gxly: Ordering, gxgy: Ordering) -> Relation:
    if lxly == EQ and gxgy == EQ:
        return Relation.EQUAL
    if gxly == LT:
        return Relation.BEFORE
    if lxly == LT and gxly == EQ and gxgy == LT:
        return Relation.MEETS
    # a point on y's lesser endpoint lands here, not on STARTS
    if gxly == EQ:
        return Relation.OVERLAPS
    if lxly == GT and lxgy == EQ and gxgy == GT:
        return Relation.MET_BY
    # a point on y's greater endpoint lands here, not on FINISHES
    if lxgy == EQ:
        return Relation.OVERLAPPED_BY
    if lxgy == GT:
        return Relation.AFTER

    if lxly == LT and gxgy == LT:
        return Relation.OVERLAPS
    if lxly == LT and gxgy == EQ:
        return Relation.FINISHED_BY
    if lxly == LT and gxgy == GT:
        return Relation.CONTAINS
    if lxly == EQ and gxgy == LT:
        return Relation.STARTS
    if lxly == EQ and gxgy == GT:
        return Relation.STARTED_BY
    if lxly == GT and gxgy == LT:
        return Relation.DURING
    if lxly == GT and gxgy == EQ:
        return Relation.FINISHES
    if lxly == GT and gxgy == GT:
        return Relation.OVERLAPPED_BY
    return Relation.UNKNOWN


def relate(
    x: "Interval[Any]", y: "Interval[Any]", *, strict: bool = False
) -> Relation:
    """Return how interval ``x`` relates to interval ``y``.

    Both intervals must be built with the same comparator; ``x.cmp`` is used
    for all four endpoint comparisons. Misuse is not detected unless
    ``strict`` is set, in which case mixed comparators raise
    MixedComparatorError and an unclassifiable pair raises
    UnknownRelationError instead of returning UNKNOWN.

    Invariant: ``relate(x, y) == invert(relate(y, x))``.
    """
    if x.cmp is not y.cmp:
        if strict:
            raise MixedComparatorError(x, y)
        logger.debug(
            "Relating intervals with different comparators: %s (%s) and %s (%s)",
            x,
            _name(x.cmp),
            y,
            _name(y.cmp),
        )

    cmp = x.cmp
    relation = _classify(
        cmp(x.lesser, y.lesser),
        cmp(x.lesser, y.greater),
        cmp(x.greater, y.lesser),
        cmp(x.greater, y.greater),
    )

    if relation is Relation.UNKNOWN:
        if strict:
            raise UnknownRelationError(x, y)
        logger.warning("No relation matched for %s and %s", x, y)
    return relation
