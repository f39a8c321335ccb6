"""Click base classes with ``--examples`` support.

Commands keep ``--help`` short and print worked invocations on
``--examples`` instead. The root group is a :class:`DomainGroup`, so
commands declared on it default to :class:`DomainCommand`.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag when *examples* text is given."""

    params: list[click.Parameter]

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        lines = [line.strip() for line in examples.splitlines() if line.strip()]

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if not value or ctx.resilient_parsing:
                return
            click.echo(f"Examples for '{ctx.command_path}':\n")
            for line in lines:
                click.echo(f"  $ {line}")
            ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show,
                help="Show usage examples and exit.",
            )
        )


class DomainCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class DomainGroup(_ExamplesMixin, click.Group):
    command_class = DomainCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)
