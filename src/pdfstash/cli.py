"""Root CLI group for pdfstash with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from pdfstash import __version__
from pdfstash.commands import register_commands
from pdfstash.commands._context import AppContext
from pdfstash.config.settings import StashSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pdfstash")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-d",
    "--dir",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Managed PDF directory (overrides config).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    directory: Path | None,
) -> None:
    """pdfstash — keep assembled PDFs in one tidy directory."""
    ctx.ensure_object(dict)
    settings = StashSettings.from_cli(
        config_path=config_path,
        directory=directory,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)