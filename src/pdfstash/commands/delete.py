"""Command: delete a stored PDF."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfstash.commands._base import StashCommand

if TYPE_CHECKING:
    from pdfstash.commands._context import AppContext


@click.command(
    cls=StashCommand,
    examples="""\
  pdfstash delete Invoice.pdf
  pdfstash delete Invoice.pdf --yes""",
)
@click.argument("name")
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def delete(app: AppContext, name: str, yes: bool) -> None:
    """Delete the stored PDF NAME. Deleting a missing PDF is not an error."""
    if not yes and not app.settings.json_output:
        click.confirm(f'Delete "{name}"?', abort=True)
    app.emit(app.documents.delete(name))
