from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ialgebra.algebra import relate
from ialgebra.ordering import Comparator, Ordering, natural_order
from ialgebra.relation import Relation

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T]):
    """A closed range ``[lesser, greater]`` under the comparator ``cmp``.

    The endpoints may be supplied in either order; they are sorted once here
    and never reordered. Unless the first endpoint compares LESS the two are
    swapped, so on a tie the second one supplied becomes ``lesser``. Every
    interval that takes part in the same relation must be built with the
    same comparator.
    """

    lesser: T
    greater: T
    cmp: Comparator[T] = field(default=natural_order, repr=False)

    def __post_init__(self) -> None:
        if self.cmp(self.lesser, self.greater) != Ordering.LESS:
            lesser, greater = self.greater, self.lesser
            object.__setattr__(self, "lesser", lesser)
            object.__setattr__(self, "greater", greater)

    def __str__(self) -> str:
        """Human-friendly string showing the range."""
        suffix = ", empty" if self.is_empty else ""
        return f"Interval({self.lesser}→{self.greater}{suffix})"

    @property
    def is_empty(self) -> bool:
        """True for a single point, i.e. lesser equals greater."""
        return self.cmp(self.lesser, self.greater) == Ordering.EQUAL

    @property
    def is_non_empty(self) -> bool:
        return not self.is_empty

    def relate(self, other: "Interval[T]", *, strict: bool = False) -> Relation:
        """How this interval relates to ``other``; see ``ialgebra.relate``."""
        return relate(self, other, strict=strict)


def make_interval(x: T, y: T, cmp: Comparator[T]) -> Interval[T]:
    """Build an interval from two endpoints in any order, sorted by ``cmp``."""
    return Interval(lesser=x, greater=y, cmp=cmp)


def interval(x: T, y: T) -> Interval[T]:
    """Build an interval using the endpoints' natural order."""
    return make_interval(x, y, natural_order)
