"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the document service lazily and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfstash.output.formatters import format_result

if TYPE_CHECKING:
    from pdfstash.config.settings import StashSettings
    from pdfstash.services.documents import DocumentService
    from pdfstash.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is only constructed on first use, so ``--help`` and
    ``--version`` never touch the managed directory.
    """

    def __init__(self, settings: StashSettings) -> None:
        self.settings = settings
        self._service: DocumentService | None = None

        from pdfstash.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def documents(self) -> DocumentService:
        """The document service (created lazily on first access)."""
        if self._service is None:
            from pdfstash.infrastructure.store import DocumentStore
            from pdfstash.services.documents import DocumentService

            self._service = DocumentService(DocumentStore.from_settings(self.settings))
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            if output:
                click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
