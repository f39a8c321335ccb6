"""Command: test whether an integer belongs to a domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dyndomain.commands._base import DomainCommand
from dyndomain.commands._options import collect_constraints, constraint_options

if TYPE_CHECKING:
    from dyndomain.commands._context import AppContext


@click.command(
    cls=DomainCommand,
    examples="""\
  dyndomain check 7 --notation "(5;10)"
  dyndomain check 3 --gt 5
  dyndomain -q check --notation "(-∞;0)" -- -1""",
)
@click.argument("value", type=int)
@click.option("--notation", default=None, help="Start from this domain instead of (-∞;∞).")
@constraint_options
@click.pass_obj
def check(
    app: AppContext,
    value: int,
    notation: str | None,
    gt_values: tuple[int | None, ...],
    ge_values: tuple[int | None, ...],
    lt_values: tuple[int | None, ...],
    le_values: tuple[int | None, ...],
) -> None:
    """Report whether VALUE is a member of the domain."""
    constraints = collect_constraints(gt_values, ge_values, lt_values, le_values)
    app.emit(app.service.check(value, constraints, notation=notation))
