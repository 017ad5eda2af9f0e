"""Comparators: the total orders intervals are built and related under.

A comparator is any pure function ``(a, b) -> Ordering``. It must be a strict
total order that gives the same answer for the same inputs every time; this
is assumed, never checked.
"""

from collections.abc import Callable
from enum import IntEnum
from numbers import Real
from typing import Any, TypeVar

from ialgebra.util import to_instant

T = TypeVar("T")
K = TypeVar("K")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, sign: Real) -> "Ordering":
        """Bucket a signed three-way comparison result of any real number type."""
        if isinstance(sign, bool) or not isinstance(sign, Real):
            raise TypeError(
                f"Comparison result must be a number, got "
                f"{type(sign).__name__!r}: {sign!r}\n"
                f"Hint: return a negative, zero, or positive number, e.g.\n"
                f"  by_sign(lambda a, b: (a > b) - (a < b))"
            )
        if sign < 0:
            return cls.LESS
        if sign > 0:
            return cls.GREATER
        return cls.EQUAL


Comparator = Callable[[T, T], Ordering]


def natural_order(x: Any, y: Any) -> Ordering:
    """Order values by their own ``<`` and ``==``.

    Floats including NaN are not totally ordered and are not supported.
    """
    try:
        if x < y:
            return Ordering.LESS
        if x == y:
            return Ordering.EQUAL
    except TypeError as exc:
        raise TypeError(
            f"Cannot order {type(x).__name__!r} against {type(y).__name__!r}.\n"
            f"Got: {x!r} and {y!r}\n"
            f"Hint: Pass an explicit comparator:\n"
            f"  make_interval(a, b, by_key(str))\n"
            f"  make_interval(a, b, by_sign(my_cmp))"
        ) from exc
    return Ordering.GREATER


def by_sign(func: Callable[[T, T], Real]) -> Comparator[T]:
    """Adapt a number-returning three-way comparison, as used by cmp_to_key.

    ``func(a, b)`` is negative when a < b, zero when equal, positive when a > b.
    """

    def compare(x: T, y: T) -> Ordering:
        return Ordering.of(func(x, y))

    return compare


def by_key(key: Callable[[T], K]) -> Comparator[T]:
    """Natural order over ``key(value)``."""

    def compare(x: T, y: T) -> Ordering:
        return natural_order(key(x), key(y))

    return compare


def reverse(cmp: Comparator[T]) -> Comparator[T]:
    def compare(x: T, y: T) -> Ordering:
        return cmp(y, x)

    return compare


def chronological(x: Any, y: Any) -> Ordering:
    """Before/equal/after order for ints, aware datetimes and dates.

    Mixed inputs are compared as instants, so ``date(2025, 1, 1)`` is equal
    to ``datetime(2025, 1, 1, tzinfo=timezone.utc)``.
    """
    return natural_order(to_instant(x), to_instant(y))
