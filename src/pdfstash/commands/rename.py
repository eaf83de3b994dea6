"""Command: rename a stored PDF."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfstash.commands._base import StashCommand

if TYPE_CHECKING:
    from pdfstash.commands._context import AppContext


@click.command(
    cls=StashCommand,
    examples="""\
  pdfstash rename Document-2024-03-05-101500-3images.pdf "Tax receipts"
  pdfstash --json rename old.pdf new""",
)
@click.argument("name")
@click.argument("new_name")
@click.pass_obj
def rename(app: AppContext, name: str, new_name: str) -> None:
    """Rename the stored PDF NAME to NEW_NAME (never overwrites)."""
    app.emit(app.documents.rename(name, new_name))
