"""DocumentService — commit, browse, and hand off stored PDFs.

Pipeline for new documents: RENDER -> COMMIT -> RESPOND. Rendering and
presenting are platform hooks; the service only passes paths and names
across that boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from pdfstash.infrastructure.errors import DocumentStoreError, NoImages
from pdfstash.services.base import BaseService
from pdfstash.services.result import ServiceResult

if TYPE_CHECKING:
    from pdfstash.infrastructure.platform import ImageSource, PresentAction, Presenter, Renderer
    from pdfstash.infrastructure.store import Relocation

logger = logging.getLogger(__name__)


class DocumentService(BaseService):
    """Service-layer wrapper around :class:`DocumentStore`."""

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def commit(
        self,
        source_path: Path,
        display_name: str,
        *,
        image_count: int = 0,
    ) -> ServiceResult:
        """Store a rendered PDF under *display_name*."""
        op = "commit"
        try:
            relocation = self._store.relocate(source_path, display_name, image_count=image_count)
        except DocumentStoreError as exc:
            return self._error(op, exc)
        return _committed(op, relocation, display_name)

    def assemble(
        self,
        renderer: Renderer,
        images: Sequence[ImageSource],
        display_name: str,
    ) -> ServiceResult:
        """Render *images* into one PDF and commit it."""
        op = "assemble"
        if not images:
            return self._error(op, NoImages())

        try:
            rendered = renderer.render(images)
        except Exception as exc:
            logger.warning("PDF generation failed", exc_info=True)
            return ServiceResult.failure(op, "RENDER_FAILED", f"Failed to generate PDF: {exc}")

        try:
            relocation = self._store.relocate(rendered, display_name, image_count=len(images))
        except DocumentStoreError as exc:
            return self._error(op, exc)
        return _committed(op, relocation, display_name, image_count=len(images))

    def discard(self, source_path: Path) -> ServiceResult:
        """Throw away a pending render without storing it."""
        op = "discard"
        try:
            removed = self._store.discard(source_path)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_SOURCE", str(exc))
        return ServiceResult(ok=True, op=op, data={"path": str(source_path), "discarded": removed})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> ServiceResult:
        """All stored documents, newest first."""
        documents = self._store.list()
        return ServiceResult(
            ok=True,
            op="list",
            data={
                "directory": str(self._store.directory),
                "count": len(documents),
                "items": [doc.summary() for doc in documents],
            },
        )

    def info(self, name: str) -> ServiceResult:
        """Fresh size and modification time for one document."""
        op = "info"
        try:
            document = self._store.get(name)
        except DocumentStoreError as exc:
            return self._error(op, exc)
        return ServiceResult(ok=True, op=op, data=document.summary())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def rename(self, name: str, new_display_name: str) -> ServiceResult:
        op = "rename"
        try:
            document = self._store.rename(name, new_display_name)
        except DocumentStoreError as exc:
            return self._error(op, exc)
        data = document.summary()
        data["previous_name"] = name
        return ServiceResult(ok=True, op=op, data=data)

    def delete(self, name: str) -> ServiceResult:
        """Delete a document. Already-gone documents are not an error."""
        op = "delete"
        try:
            removed = self._store.delete(name)
        except DocumentStoreError as exc:
            return self._error(op, exc)
        warnings = [] if removed else [f"PDF not found, nothing to delete: {name}"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": name, "deleted": removed},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Hand-off
    # ------------------------------------------------------------------

    def present(
        self,
        presenter: Presenter,
        name: str,
        *,
        action: PresentAction = "open",
    ) -> ServiceResult:
        """Pass a stored document's path and name to the OS presenter."""
        op = action
        try:
            document = self._store.get(name)
        except DocumentStoreError as exc:
            return self._error(op, exc)

        try:
            presenter.present(document.path, document.name, action=action)
        except Exception as exc:
            logger.warning("Presenting %s failed", document.name, exc_info=True)
            return ServiceResult.failure(op, "PRESENT_FAILED", f"Failed to {action} PDF: {exc}")
        data = {"name": document.name, "path": str(document.path)}
        return ServiceResult(ok=True, op=op, data=data)


def _committed(
    op: str,
    relocation: Relocation,
    display_name: str,
    **extra: object,
) -> ServiceResult:
    warnings: list[str] = []
    if relocation.sanitized.fallback_used:
        warnings.append(
            f"SANITIZATION_FALLBACK_USED: {display_name!r} is not a usable name, "
            f"saved as {relocation.sanitized.name}"
        )
    if not relocation.source_cleaned:
        warnings.append("Temporary source file could not be removed")

    data = relocation.document.summary()
    data["requested_name"] = display_name
    data.update(extra)
    return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
