"""Command: list the integer members of a domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dyndomain.commands._base import DomainCommand
from dyndomain.commands._options import collect_constraints, constraint_options

if TYPE_CHECKING:
    from dyndomain.commands._context import AppContext


@click.command(
    "enumerate",
    cls=DomainCommand,
    examples="""\
  dyndomain enumerate --gt 5 --lt 10
  dyndomain enumerate --notation "[1;3]⋃(7;9]"
  dyndomain enumerate --gt 0 --limit 5
  dyndomain -q enumerate --ge 1 --le 3""",
)
@click.option("--notation", default=None, help="Start from this domain instead of (-∞;∞).")
@click.option("--limit", default=None, type=int, help="Max members to list.")
@constraint_options
@click.pass_obj
def enumerate_cmd(
    app: AppContext,
    notation: str | None,
    limit: int | None,
    gt_values: tuple[int | None, ...],
    ge_values: tuple[int | None, ...],
    lt_values: tuple[int | None, ...],
    le_values: tuple[int | None, ...],
) -> None:
    """List domain members in enumeration order.

    Infinite domains are capped at the configured default limit.
    """
    constraints = collect_constraints(gt_values, ge_values, lt_values, le_values)
    app.emit(app.service.enumerate(constraints, notation=notation, limit=limit))
