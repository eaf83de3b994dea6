"""Command: commit a rendered PDF into the managed directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pdfstash.commands._base import StashCommand

if TYPE_CHECKING:
    from pdfstash.commands._context import AppContext


@click.command(
    cls=StashCommand,
    examples="""\
  pdfstash commit /tmp/render-123.pdf "Invoice March"
  pdfstash commit scan.pdf "" --images 4
  pdfstash --json commit out.pdf Report""",
)
@click.argument("source", type=click.Path(path_type=Path))
@click.argument("name")
@click.option(
    "--images",
    "image_count",
    type=click.IntRange(min=0),
    default=0,
    help="Image count used in the default name when NAME is unusable.",
)
@click.pass_obj
def commit(app: AppContext, source: Path, name: str, image_count: int) -> None:
    """Store SOURCE under NAME (the source file is removed afterwards)."""
    app.emit(app.documents.commit(source, name, image_count=image_count))
