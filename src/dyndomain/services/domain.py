"""DomainService — build, render, enumerate, and query domains.

Every operation starts from either a notation string or the universal
domain, then applies constraints in order. Enumeration of infinite or
oversized domains is capped by the ``[enumerate]`` config section and the
cap is reported as a warning, never as an error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from dyndomain.domain.algebra import Domain
from dyndomain.domain.notation import NotationError, parse_notation
from dyndomain.services.base import BaseService
from dyndomain.services.contracts import (
    Constraint,
    DomainData,
    MembersData,
    MembershipData,
    dump_validated,
)
from dyndomain.services.result import (
    INVALID_BOUND,
    INVALID_LIMIT,
    INVALID_NOTATION,
    ServiceResult,
    failure,
)

logger = logging.getLogger(__name__)

ConstraintInput = Constraint | Mapping[str, Any]


class _BuildError(Exception):
    """Internal: carries a ready-made failure out of ``_build``."""

    def __init__(self, result: ServiceResult) -> None:
        super().__init__(result.error.message if result.error else result.op)
        self.result = result


class DomainService(BaseService):
    """Operations over domains described by notation and constraints."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(
        self,
        constraints: Sequence[ConstraintInput] = (),
        *,
        notation: str | None = None,
    ) -> ServiceResult:
        """Build a domain and describe it."""
        op = "render"
        try:
            domain, applied = self._build(op, constraints, notation)
        except _BuildError as exc:
            return exc.result

        data = dump_validated(
            DomainData,
            {
                "notation": self._notation(domain),
                "kind": domain.kind,
                "finite": domain.is_finite(),
                "cardinality": domain.cardinality(),
                "constraints": [c.describe() for c in applied],
            },
        )
        return self._success(op, data)

    def enumerate(
        self,
        constraints: Sequence[ConstraintInput] = (),
        *,
        notation: str | None = None,
        limit: int | None = None,
    ) -> ServiceResult:
        """Build a domain and list its members, capped by config limits."""
        op = "enumerate"
        if limit is not None and limit <= 0:
            return failure(op, INVALID_LIMIT, f"Limit must be positive, got {limit}", limit=limit)
        try:
            domain, _applied = self._build(op, constraints, notation)
        except _BuildError as exc:
            return exc.result

        cfg = self._settings.enumerate
        warnings: list[str] = []
        cardinality = domain.cardinality()
        rendered = self._notation(domain)

        if limit is not None and limit > cfg.max_limit:
            warnings.append(f"Limit {limit} exceeds max_limit; using {cfg.max_limit}")
            limit = cfg.max_limit
        if limit is None:
            if cardinality is None:
                limit = cfg.default_limit
                warnings.append(
                    f"Domain {rendered} is infinite; enumeration capped at {limit} members"
                )
            elif cardinality > cfg.max_limit:
                limit = cfg.max_limit
                warnings.append(
                    f"Domain {rendered} has {cardinality} members; "
                    f"enumeration capped at {limit}"
                )

        members: list[int] = []
        domain.generate(_collect, members, limit=limit)
        truncated = cardinality is None or len(members) < cardinality
        logger.debug("Enumerated %d members of %s", len(members), rendered)

        data = dump_validated(
            MembersData,
            {
                "notation": rendered,
                "count": len(members),
                "members": members,
                "truncated": truncated,
            },
        )
        return self._success(op, data, warnings=warnings, meta={"limit": limit})

    def check(
        self,
        value: int,
        constraints: Sequence[ConstraintInput] = (),
        *,
        notation: str | None = None,
    ) -> ServiceResult:
        """Report whether *value* is a member of the built domain."""
        op = "check"
        try:
            domain, _applied = self._build(op, constraints, notation)
        except _BuildError as exc:
            return exc.result

        data = dump_validated(
            MembershipData,
            {
                "notation": self._notation(domain),
                "value": value,
                "member": value in domain,
            },
        )
        return self._success(op, data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _notation(self, domain: Domain) -> str:
        return domain.notation(self._settings.notation.separator)

    def _build(
        self,
        op: str,
        constraints: Sequence[ConstraintInput],
        notation: str | None,
    ) -> tuple[Domain, list[Constraint]]:
        separator = self._settings.notation.separator
        if notation is None:
            domain: Domain = Domain.new()
        else:
            try:
                domain = parse_notation(notation, separator)
            except NotationError as exc:
                raise _BuildError(
                    failure(
                        op,
                        INVALID_NOTATION,
                        str(exc),
                        text=exc.text,
                        position=exc.position,
                    )
                ) from exc

        applied: list[Constraint] = []
        for raw in constraints:
            try:
                constraint = (
                    raw if isinstance(raw, Constraint) else Constraint.model_validate(raw)
                )
            except ValidationError as exc:
                raise _BuildError(
                    failure(
                        op,
                        INVALID_BOUND,
                        f"Invalid constraint: {raw!r}",
                        errors=exc.errors(include_url=False, include_context=False),
                    )
                ) from exc
            before = domain
            domain = constraint.apply(domain)
            logger.debug(
                "Applied %s", constraint.describe(), extra={"before": before, "after": domain}
            )
            applied.append(constraint)
        return domain, applied


def _collect(member: int, sink: list[int]) -> None:
    sink.append(member)
