"""Typed payload contracts for service boundaries.

``Constraint`` describes one narrowing step as plain data so the CLI
and embedding programs can build domains without touching the algebra
types. The ``*Data`` models validate payload shapes before they leave
the service layer.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel

from dyndomain.domain.algebra import Domain
from dyndomain.domain.bounds import Bound, Excluded, Included, Unbounded

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class Constraint(BaseModel):
    """One narrowing step: ``x <op> value``.

    A ``value`` of None stands for an unbounded endpoint.
    """

    model_config = {"frozen": True}

    op: Literal["gt", "ge", "lt", "le"]
    value: int | None = None

    def bound(self) -> Bound:
        if self.value is None:
            return Unbounded()
        if self.op in ("ge", "le"):
            return Included(self.value)
        return Excluded(self.value)

    def apply(self, domain: Domain) -> Domain:
        if self.op in ("gt", "ge"):
            return domain.gt(self.bound())
        return domain.lt(self.bound())

    def describe(self) -> str:
        symbol = {"gt": ">", "ge": ">=", "lt": "<", "le": "<="}[self.op]
        shown = "unbounded" if self.value is None else str(self.value)
        return f"x {symbol} {shown}"


class DomainData(BaseModel):
    """Payload contract for ``DomainService.render``."""

    notation: str
    kind: str
    finite: bool
    cardinality: int | None
    constraints: list[str]


class MembersData(BaseModel):
    """Payload contract for ``DomainService.enumerate``."""

    notation: str
    count: int
    members: list[int]
    truncated: bool


class MembershipData(BaseModel):
    """Payload contract for ``DomainService.check``."""

    notation: str
    value: int
    member: bool
