"""Interval endpoints and their normalization.

A bound is one endpoint of an interval: ``Included(v)`` keeps the point,
``Excluded(v)`` drops it, ``Unbounded`` places no constraint on that side.

All narrowing logic compares against a single form, the *exclusive integer
boundary*. ``normalize`` converts any bound into that form for a given side:

- lower side: ``Included(v)`` -> ``v - 1`` (``x > v - 1`` iff ``x >= v``)
- upper side: ``Included(v)`` -> ``v + 1`` (``x < v + 1`` iff ``x <= v``)
- ``Excluded(v)`` -> ``v`` on either side
- ``Unbounded`` -> ``None`` (no finite boundary)

INVARIANT: Bounds are immutable. Narrowing produces new bounds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

INFINITY = "∞"


class Side(StrEnum):
    """Which end of an interval a bound sits on."""

    LOWER = "lower"
    UPPER = "upper"


class Bound(BaseModel, ABC):
    """Base for the three endpoint variants.

    Subclasses say where the first member inside them lies and how they
    render on either side of an interval.
    """

    model_config = {"frozen": True}

    def is_finite(self) -> bool:
        return True

    @abstractmethod
    def first_inside(self, side: Side) -> int | None:
        """The integer immediately inside this bound, or None if unbounded."""

    @abstractmethod
    def token(self, side: Side) -> str:
        """Render this bound as the lower or upper half of an interval."""


class Included(Bound):
    """Closed endpoint: *value* belongs to the interval."""

    kind: Literal["included"] = "included"
    value: int

    def __init__(self, value: int | None = None, /, **data: object) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    def first_inside(self, side: Side) -> int:
        return self.value

    def token(self, side: Side) -> str:
        return f"[{self.value}" if side is Side.LOWER else f"{self.value}]"


class Excluded(Bound):
    """Open endpoint: *value* does not belong to the interval."""

    kind: Literal["excluded"] = "excluded"
    value: int

    def __init__(self, value: int | None = None, /, **data: object) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    def first_inside(self, side: Side) -> int:
        return self.value + 1 if side is Side.LOWER else self.value - 1

    def token(self, side: Side) -> str:
        return f"({self.value}" if side is Side.LOWER else f"{self.value})"


class Unbounded(Bound):
    """No constraint on this side (conceptually -inf or +inf)."""

    kind: Literal["unbounded"] = "unbounded"

    def is_finite(self) -> bool:
        return False

    def first_inside(self, side: Side) -> None:
        return None

    def token(self, side: Side) -> str:
        return f"(-{INFINITY}" if side is Side.LOWER else f"{INFINITY})"


AnyBound = Annotated[Included | Excluded | Unbounded, Field(discriminator="kind")]


def normalize(bound: Bound, side: Side) -> int | None:
    """Convert *bound* to the exclusive integer boundary for *side*.

    Returns None for ``Unbounded``: there is no finite boundary to compare
    against, and callers decide what "no constraint" means for them.
    """
    if isinstance(bound, Included):
        return bound.value - 1 if side is Side.LOWER else bound.value + 1
    if isinstance(bound, Excluded):
        return bound.value
    return None
