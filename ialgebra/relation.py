from enum import Enum
from typing import Any


class Relation(Enum):
    """How interval x relates to interval y.

    ::

        BEFORE         x: [---]             AFTER          x:         [---]
                       y:       [---]                      y: [---]

        MEETS          x: [---]             MET_BY         x:     [---]
                       y:     [---]                        y: [---]

        OVERLAPS       x: [---]             OVERLAPPED_BY  x:   [---]
                       y:   [---]                          y: [---]

        FINISHED_BY    x: [-----]           FINISHES       x:   [---]
                       y:   [---]                          y: [-----]

        CONTAINS       x: [-------]         DURING         x:   [---]
                       y:   [---]                          y: [-------]

        STARTS         x: [---]             STARTED_BY     x: [-----]
                       y: [-----]                          y: [---]

        EQUAL          x: [---]
                       y: [---]

    UNKNOWN is never a geometric answer. Seeing it means the comparator is
    not a total order or the intervals were built with different comparators.
    """

    UNKNOWN = "unknown"
    BEFORE = "before"
    MEETS = "meets"
    OVERLAPS = "overlaps"
    FINISHED_BY = "finished_by"
    CONTAINS = "contains"
    STARTS = "starts"
    EQUAL = "equal"
    STARTED_BY = "started_by"
    DURING = "during"
    FINISHES = "finishes"
    OVERLAPPED_BY = "overlapped_by"
    MET_BY = "met_by"
    AFTER = "after"

    @property
    def inverse(self) -> "Relation":
        """The relation of y to x."""
        return invert(self)

    @property
    def is_known(self) -> bool:
        return self is not Relation.UNKNOWN


_INVERSES = {
    Relation.UNKNOWN: Relation.UNKNOWN,
    Relation.BEFORE: Relation.AFTER,
    Relation.MEETS: Relation.MET_BY,
    Relation.OVERLAPS: Relation.OVERLAPPED_BY,
    Relation.FINISHED_BY: Relation.FINISHES,
    Relation.CONTAINS: Relation.DURING,
    Relation.STARTS: Relation.STARTED_BY,
    Relation.EQUAL: Relation.EQUAL,
    Relation.STARTED_BY: Relation.STARTS,
    Relation.DURING: Relation.CONTAINS,
    Relation.FINISHES: Relation.FINISHED_BY,
    Relation.OVERLAPPED_BY: Relation.OVERLAPS,
    Relation.MET_BY: Relation.MEETS,
    Relation.AFTER: Relation.BEFORE,
}


def invert(relation: Any) -> Relation:
    """Swap the roles of x and y. Non-relations map to UNKNOWN."""
    if not isinstance(relation, Relation):
        return Relation.UNKNOWN
    return _INVERSES[relation]
