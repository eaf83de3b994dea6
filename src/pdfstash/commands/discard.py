"""Command: discard a pending render without storing it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pdfstash.commands._base import StashCommand

if TYPE_CHECKING:
    from pdfstash.commands._context import AppContext


@click.command(cls=StashCommand, examples="  pdfstash discard /tmp/render-123.pdf")
@click.argument("source", type=click.Path(path_type=Path))
@click.pass_obj
def discard(app: AppContext, source: Path) -> None:
    """Remove the unsaved render SOURCE."""
    app.emit(app.documents.discard(source))
