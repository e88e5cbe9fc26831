"""The ``tmplhier`` command group."""

from __future__ import annotations

import click

from tmplhier import __version__
from tmplhier.commands import register_commands
from tmplhier.commands._context import AppContext
from tmplhier.config.settings import TmplSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="tmplhier")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr.")
@click.option("--log-json", is_flag=True, help="Log as JSON lines on stderr.")
@click.option(
    "-c", "--config", "config_path", metavar="FILE", help="Read this tmplhier.toml instead."
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Explain which template a page view resolves to, and why."""
    ctx.obj = AppContext(
        TmplSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
