"""Subcommand modules for pdfstash.

register_commands() imports each command lazily so ``pdfstash --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every subcommand to the root group."""
    from pdfstash.commands.commit import commit
    from pdfstash.commands.delete import delete
    from pdfstash.commands.discard import discard
    from pdfstash.commands.info import info
    from pdfstash.commands.list_cmd import list_cmd
    from pdfstash.commands.open_cmd import open_cmd
    from pdfstash.commands.rename import rename

    cli.add_command(commit)
    cli.add_command(list_cmd)
    cli.add_command(info)
    cli.add_command(rename)
    cli.add_command(delete)
    cli.add_command(discard)
    cli.add_command(open_cmd)
