"""Shared constraint options for commands that build a domain.

``--gt/--ge/--lt/--le`` may each be repeated. Values are integers, or
``inf``/``-inf``/``∞`` for an unbounded endpoint (which collapses the
domain to the empty set).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from dyndomain.services.contracts import Constraint

F = TypeVar("F", bound=Callable[..., Any])

_UNBOUNDED_SPELLINGS = frozenset({"inf", "+inf", "-inf", "∞", "+∞", "-∞"})


class BoundValue(click.ParamType):
    """An integer endpoint, or None for an unbounded one."""

    name = "int|inf"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if value is None or isinstance(value, int):
            return value
        text = str(value).strip().lower()
        if text in _UNBOUNDED_SPELLINGS:
            return None
        try:
            return int(text)
        except ValueError:
            self.fail(f"{value!r} is not an integer or 'inf'", param, ctx)


BOUND_VALUE = BoundValue()


def constraint_options(func: F) -> F:
    """Attach the four repeatable narrowing options to a command."""
    for op, help_text in reversed(
        [
            ("gt", "Keep values greater than N."),
            ("ge", "Keep values greater than or equal to N."),
            ("lt", "Keep values less than N."),
            ("le", "Keep values less than or equal to N."),
        ]
    ):
        func = click.option(
            f"--{op}",
            f"{op}_values",
            type=BOUND_VALUE,
            multiple=True,
            metavar="N",
            help=help_text,
        )(func)
    return func


def collect_constraints(
    gt_values: tuple[int | None, ...],
    ge_values: tuple[int | None, ...],
    lt_values: tuple[int | None, ...],
    le_values: tuple[int | None, ...],
) -> list[Constraint]:
    """Turn option tuples into constraints, lower-side first."""
    constraints: list[Constraint] = []
    for op, values in (
        ("gt", gt_values),
        ("ge", ge_values),
        ("lt", lt_values),
        ("le", le_values),
    ):
        constraints.extend(Constraint(op=op, value=v) for v in values)
    return constraints
