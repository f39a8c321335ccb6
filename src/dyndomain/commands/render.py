"""Command: build a domain from constraints and print its notation."""

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
  dyndomain render --gt 5
  dyndomain render --gt 5 --le 10
  dyndomain render --notation "[0;10)" --gt 3
  dyndomain --json render --ge -2 --lt 2""",
)
@click.option("--notation", default=None, help="Start from this domain instead of (-∞;∞).")
@constraint_options
@click.pass_obj
def render(
    app: AppContext,
    notation: str | None,
    gt_values: tuple[int | None, ...],
    ge_values: tuple[int | None, ...],
    lt_values: tuple[int | None, ...],
    le_values: tuple[int | None, ...],
) -> None:
    """Narrow a domain and print it in interval notation."""
    constraints = collect_constraints(gt_values, ge_values, lt_values, le_values)
    app.emit(app.service.render(constraints, notation=notation))
