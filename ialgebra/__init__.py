from importlib.resources import files

from .algebra import MixedComparatorError, UnknownRelationError, relate
from .interval import Interval, interval, make_interval
from .ordering import (
    Comparator,
    Ordering,
    by_key,
    by_sign,
    chronological,
    natural_order,
    reverse,
)
from .relation import Relation, invert

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Interval",
    "Relation",
    "Ordering",
    "Comparator",
    "interval",
    "make_interval",
    "relate",
    "invert",
    "natural_order",
    "by_sign",
    "by_key",
    "reverse",
    "chronological",
    "UnknownRelationError",
    "MixedComparatorError",
    "docs",
]
