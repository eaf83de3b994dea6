"""Command: open or share a stored PDF through the OS."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfstash.commands._base import StashCommand

if TYPE_CHECKING:
    from pdfstash.commands._context import AppContext


@click.command(
    "open",
    cls=StashCommand,
    examples="""\
  pdfstash open Invoice.pdf
  pdfstash open Invoice.pdf --share""",
)
@click.argument("name")
@click.option("--share", is_flag=True, help="Reveal the file for sharing instead of opening it.")
@click.pass_obj
def open_cmd(app: AppContext, name: str, share: bool) -> None:
    """Open the stored PDF NAME in the default viewer."""
    from pdfstash.infrastructure.platform import LaunchPresenter

    action = "share" if share else "open"
    app.emit(app.documents.present(LaunchPresenter(), name, action=action))
