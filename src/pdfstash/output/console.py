"""Rich Console factory and theme for pdfstash output.

Consoles render to a StringIO buffer so ``format_result() -> str`` stays
a pure function. In non-TTY environments (tests, pipes) Rich disables
color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STASH_THEME = Theme(
    {
        "stash.ok": "bold green",
        "stash.error": "bold red",
        "stash.warning": "bold yellow",
        "stash.op": "bold cyan",
        "stash.key": "dim",
        "stash.name": "bold",
        "stash.size": "magenta",
        "stash.date": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=STASH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
