"""Command: show size and date of one stored PDF."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfstash.commands._base import StashCommand

if TYPE_CHECKING:
    from pdfstash.commands._context import AppContext


@click.command(cls=StashCommand, examples="  pdfstash info Invoice.pdf")
@click.argument("name")
@click.pass_obj
def info(app: AppContext, name: str) -> None:
    """Show metadata for the stored PDF NAME."""
    app.emit(app.documents.info(name))
