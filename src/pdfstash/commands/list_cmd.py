"""Command: list stored PDFs, newest first."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfstash.commands._base import StashCommand

if TYPE_CHECKING:
    from pdfstash.commands._context import AppContext


@click.command(
    "list",
    cls=StashCommand,
    examples="""\
  pdfstash list
  pdfstash -q list
  pdfstash --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List stored PDFs, newest first."""
    app.emit(app.documents.list())
