"""The domain algebra: empty set, single interval, or union of intervals.

A domain is a frozen value. ``gt``/``lt`` narrow it by returning a new
domain; nothing is ever mutated in place, so earlier intermediate domains
held by a caller stay valid.

Narrowing is defined on single intervals only. ``Empty`` and ``Union``
receivers come back unchanged.

Conventions kept as the established contract, not as set logic:

- Narrowing by ``Unbounded`` collapses the result to ``Empty``. "Greater
  than -inf" would logically impose no constraint.
- A winning bound takes the existing side's variant. The incoming value is
  normalized, then compared against the existing bound's raw value. An
  ``Included(3)`` lower side narrowed by ``gt(Excluded(5))`` becomes
  ``Included(5)``, and ``gt(Excluded(5))`` leaves ``Included(5)`` as is.
  Only an ``Unbounded`` side turns into ``Excluded``.

INVARIANT: A ``Union`` never directly contains another ``Union``.
Construction flattens nested unions.
"""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

from dyndomain.domain.bounds import (
    AnyBound,
    Bound,
    Excluded,
    Included,
    Side,
    Unbounded,
    normalize,
)

logger = logging.getLogger(__name__)

EMPTY_SET = "∅"
UNION_GLYPH = "⋃"
DEFAULT_SEPARATOR = ";"


class Signal(StrEnum):
    """Values an enumeration callback may return to steer ``generate``."""

    CONTINUE = "continue"
    STOP = "stop"


MemberCallback = Callable[[int, Any], "Signal | None"]


class Domain(BaseModel, ABC):
    """Base for the three domain variants.

    Subclasses implement rendering, enumeration, and the membership queries.
    Narrowing hooks default to returning the receiver unchanged.

    Usage::

        domain = Domain.new().gt(Excluded(5)).lt(Excluded(10))
        str(domain)                   # "(5;10)"
        list(domain.iter_members())   # [6, 7, 8, 9]
    """

    model_config = {"frozen": True}

    @classmethod
    def new(cls) -> Interval:
        """The universal domain: every integer."""
        return Interval(Unbounded(), Unbounded())

    # --- Narrowing ---

    def gt(self, value: Bound) -> Domain:
        """Raise the lower side to the normalized *value* if it is larger."""
        boundary = normalize(value, Side.LOWER)
        if boundary is None:
            logger.debug("gt() with unbounded value collapses %s to empty", self)
            return Empty()
        return self._raise_lower(boundary)

    def lt(self, value: Bound) -> Domain:
        """Drop the upper side to the normalized *value* if it is smaller."""
        boundary = normalize(value, Side.UPPER)
        if boundary is None:
            logger.debug("lt() with unbounded value collapses %s to empty", self)
            return Empty()
        return self._drop_upper(boundary)

    def ge(self, value: int) -> Domain:
        """Shorthand for ``gt(Included(value))``."""
        return self.gt(Included(value))

    def le(self, value: int) -> Domain:
        """Shorthand for ``lt(Included(value))``."""
        return self.lt(Included(value))

    def _raise_lower(self, boundary: int) -> Domain:
        return self

    def _drop_upper(self, boundary: int) -> Domain:
        return self

    # --- Rendering ---

    @abstractmethod
    def notation(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Render in interval notation, e.g. ``[5;10)⋃(20;∞)``."""

    def __str__(self) -> str:
        return self.notation()

    # --- Enumeration ---

    @abstractmethod
    def iter_members(self) -> Iterator[int]:
        """Lazily yield every integer in the domain.

        Finite intervals walk upward. An interval bounded only below walks
        upward forever; one bounded only above walks downward forever. The
        full line yields ``0, 1, -1, 2, -2, ...``. Unions walk each child
        in order with no deduplication.
        """

    def generate(
        self,
        callback: MemberCallback,
        context: Any = None,
        *,
        limit: int | None = None,
    ) -> int:
        """Invoke ``callback(member, context)`` for each member.

        Enumeration ends when the members run out, when *callback* returns
        ``Signal.STOP``, or after *limit* invocations. An infinite domain
        with neither a stop signal nor a limit never returns.

        Returns the number of callback invocations.
        """
        if limit is not None and limit <= 0:
            return 0
        calls = 0
        for member in self.iter_members():
            calls += 1
            if callback(member, context) is Signal.STOP:
                break
            if limit is not None and calls >= limit:
                logger.debug("Enumeration of %s truncated at %d members", self, limit)
                break
        return calls

    # --- Queries ---

    @abstractmethod
    def contains(self, value: int) -> bool:
        """Whether *value* is a member."""

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    @abstractmethod
    def is_finite(self) -> bool:
        """Whether ``iter_members()`` terminates on its own."""

    @abstractmethod
    def cardinality(self) -> int | None:
        """Number of members ``generate`` would emit, or None if infinite."""


class Empty(Domain):
    """The empty set. Absorbing for every narrowing."""

    kind: Literal["empty"] = "empty"

    def notation(self, separator: str = DEFAULT_SEPARATOR) -> str:
        return EMPTY_SET

    def iter_members(self) -> Iterator[int]:
        return iter(())

    def contains(self, value: int) -> bool:
        return False

    def is_finite(self) -> bool:
        return True

    def cardinality(self) -> int:
        return 0


class Interval(Domain):
    """A contiguous run of integers between *lower* and *upper*."""

    kind: Literal["interval"] = "interval"
    lower: AnyBound
    upper: AnyBound

    def __init__(
        self,
        lower: Bound | None = None,
        upper: Bound | None = None,
        /,
        **data: Any,
    ) -> None:
        if lower is not None:
            data["lower"] = lower
        if upper is not None:
            data["upper"] = upper
        super().__init__(**data)

    def _raise_lower(self, boundary: int) -> Domain:
        lower = self.lower
        if isinstance(lower, Unbounded):
            return Interval(Excluded(boundary), self.upper)
        if boundary > lower.value:
            return Interval(type(lower)(boundary), self.upper)
        return self

    def _drop_upper(self, boundary: int) -> Domain:
        upper = self.upper
        if isinstance(upper, Unbounded):
            return Interval(self.lower, Excluded(boundary))
        if boundary < upper.value:
            return Interval(self.lower, type(upper)(boundary))
        return self

    def notation(self, separator: str = DEFAULT_SEPARATOR) -> str:
        return f"{self.lower.token(Side.LOWER)}{separator}{self.upper.token(Side.UPPER)}"

    def iter_members(self) -> Iterator[int]:
        start = self.lower.first_inside(Side.LOWER)
        stop = self.upper.first_inside(Side.UPPER)
        if start is not None and stop is not None:
            yield from range(start, stop + 1)
        elif start is not None:
            yield from itertools.count(start)
        elif stop is not None:
            yield from itertools.count(stop, -1)
        else:
            yield 0
            for n in itertools.count(1):
                yield n
                yield -n

    def contains(self, value: int) -> bool:
        low = normalize(self.lower, Side.LOWER)
        high = normalize(self.upper, Side.UPPER)
        return (low is None or value > low) and (high is None or value < high)

    def is_finite(self) -> bool:
        return self.lower.is_finite() and self.upper.is_finite()

    def cardinality(self) -> int | None:
        start = self.lower.first_inside(Side.LOWER)
        stop = self.upper.first_inside(Side.UPPER)
        if start is None or stop is None:
            return None
        return max(0, stop - start + 1)


class Union(Domain):
    """Set union of its *items*, kept in the order given."""

    kind: Literal["union"] = "union"
    items: tuple[AnyDomain, ...] = ()

    @field_validator("items", mode="after")
    @classmethod
    def _flatten(cls, items: tuple[Domain, ...]) -> tuple[Domain, ...]:
        flat: list[Domain] = []
        for item in items:
            if isinstance(item, Union):
                flat.extend(item.items)
            else:
                flat.append(item)
        return tuple(flat)

    def notation(self, separator: str = DEFAULT_SEPARATOR) -> str:
        if not self.items:
            return EMPTY_SET
        return UNION_GLYPH.join(item.notation(separator) for item in self.items)

    def iter_members(self) -> Iterator[int]:
        for item in self.items:
            yield from item.iter_members()

    def contains(self, value: int) -> bool:
        return any(item.contains(value) for item in self.items)

    def is_finite(self) -> bool:
        return all(item.is_finite() for item in self.items)

    def cardinality(self) -> int | None:
        total = 0
        for item in self.items:
            count = item.cardinality()
            if count is None:
                return None
            total += count
        return total


AnyDomain = Annotated[Empty | Interval | Union, Field(discriminator="kind")]

Union.model_rebuild()


def union(*domains: Domain) -> Union:
    """Build a ``Union`` of *domains*, flattening any nested unions."""
    return Union(items=domains)
