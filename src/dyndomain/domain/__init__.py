"""Domain layer — bounds, the domain algebra, and its notation.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""

from dyndomain.domain.algebra import (
    AnyDomain,
    Domain,
    Empty,
    Interval,
    Signal,
    Union,
    union,
)
from dyndomain.domain.bounds import (
    AnyBound,
    Bound,
    Excluded,
    Included,
    Side,
    Unbounded,
    normalize,
)
from dyndomain.domain.notation import NotationError, check_separator, parse_notation

__all__ = [
    "AnyBound",
    "AnyDomain",
    "Bound",
    "Domain",
    "Empty",
    "Excluded",
    "Included",
    "Interval",
    "NotationError",
    "Side",
    "Signal",
    "Unbounded",
    "Union",
    "check_separator",
    "normalize",
    "parse_notation",
    "union",
]
