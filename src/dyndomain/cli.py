"""Root CLI group for dyndomain with global flags and command registration."""

from __future__ import annotations

import click

from dyndomain import __version__
from dyndomain.commands import register_commands
from dyndomain.commands._base import DomainGroup
from dyndomain.commands._context import AppContext
from dyndomain.config.settings import DomainSettings
from dyndomain.domain.notation import check_separator


def _separator(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return check_separator(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


@click.group(
    cls=DomainGroup,
    invoke_without_command=True,
    examples="""\
  dyndomain render --gt 5 --lt 10
  dyndomain -s , render --ge 1
  dyndomain --json enumerate --notation "[1;3]⋃(7;9]"
  dyndomain -c ./limits.toml enumerate --gt 0""",
)
@click.version_option(version=__version__, prog_name="dyndomain")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Show constraints, config source, debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Use this dyndomain.toml.")
@click.option(
    "-s",
    "--separator",
    default=None,
    callback=_separator,
    help="Separator between interval bounds, for input and output (default ';').",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    separator: str | None,
) -> None:
    """dyndomain — integer domains in interval notation.

    Start from every integer (or --notation), narrow with --gt/--ge/--lt/--le,
    then render, enumerate, or check membership.
    """
    settings = DomainSettings.from_cli(
        config_path=config_path,
        separator=separator,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
