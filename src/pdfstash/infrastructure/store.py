"""DocumentStore — the managed directory of finished PDFs.

INVARIANT: Files are truth. The store keeps no index; every listing and
metadata read goes to the filesystem. The store is the only writer of
its directory, and it never overwrites a pre-existing document: commits
and renames always pick a fresh name on collision.

Commit lifecycle::

    Pending -> Resolving -> Relocated -> SourceCleaned
                                      \\-> SourceCleanupFailed (logged)

Concurrent commits of the same name follow a last-writer-wins policy:
the destination is opened for a plain (non-exclusive) write, so the copy
is the only serialization point.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pdfstash.domain.documents import DocumentMetadata, StoredDocument
from pdfstash.domain.names import (
    MAX_NAME_LENGTH,
    SanitizedName,
    has_canonical_extension,
    sanitize_name,
)
from pdfstash.infrastructure.collisions import DEFAULT_MAX_RETRIES, epoch_millis, resolve_name
from pdfstash.infrastructure.errors import DestinationUnwritable, DocumentNotFound, SourceNotFound

if TYPE_CHECKING:
    from pdfstash.config.settings import StashSettings

logger = logging.getLogger(__name__)

# A stored document, or its bare file name.
DocumentRef = StoredDocument | str


@dataclass(frozen=True)
class Relocation:
    """Result of a successful commit.

    ``source_cleaned`` is False when the pending source could not be
    removed; the commit still succeeded.
    """

    document: StoredDocument
    sanitized: SanitizedName
    source_cleaned: bool = True


class DocumentStore:
    """Commit, list, inspect, rename, and delete PDFs in one directory.

    The directory is an explicit handle: every store instance owns exactly
    one directory, and nothing here is process-global.
    """

    def __init__(
        self,
        directory: Path,
        *,
        max_name_length: int = MAX_NAME_LENGTH,
        max_collision_retries: int = DEFAULT_MAX_RETRIES,
        clock: Callable[[], int] = epoch_millis,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.directory = Path(directory)
        self._max_name_length = max_name_length
        self._max_retries = max_collision_retries
        self._clock = clock
        self._now = now

    @classmethod
    def from_settings(cls, settings: StashSettings) -> DocumentStore:
        return cls(
            settings.store_directory,
            max_name_length=settings.store.max_name_length,
            max_collision_retries=settings.store.max_collision_retries,
        )

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(
        self,
        source_path: Path,
        desired_display_name: str,
        *,
        image_count: int = 0,
    ) -> StoredDocument:
        """Copy a freshly rendered PDF into the store under a resolved name.

        The source is removed afterwards on a best-effort basis. Raises
        :class:`SourceNotFound` if *source_path* is missing and
        :class:`DestinationUnwritable` if the copy fails.
        """
        return self.relocate(source_path, desired_display_name, image_count=image_count).document

    def relocate(
        self,
        source_path: Path,
        desired_display_name: str,
        *,
        image_count: int = 0,
    ) -> Relocation:
        """Same as :meth:`commit`, also reporting how the name and cleanup went."""
        source = Path(source_path)
        if not source.is_file():
            raise SourceNotFound(source)

        sanitized = self._sanitize(desired_display_name, image_count)
        destination = self._ensure_directory() / self._resolve(sanitized.name)

        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            _remove_quietly(destination)
            raise DestinationUnwritable(destination, str(exc)) from exc
        logger.debug("Committed %s -> %s", source, destination)

        source_cleaned = True
        try:
            source.unlink(missing_ok=True)
        except OSError:
            source_cleaned = False
            logger.warning("Could not delete source file: %s", source, exc_info=True)

        return Relocation(
            document=StoredDocument.from_path(destination),
            sanitized=sanitized,
            source_cleaned=source_cleaned,
        )

    def discard(self, source_path: Path) -> bool:
        """Drop a pending render without storing it. Idempotent."""
        source = Path(source_path)
        if source.resolve().parent == self.directory.resolve():
            msg = f"Refusing to discard a stored document: {source.name}"
            raise ValueError(msg)
        if not source.exists():
            return False
        if not source.is_file():
            msg = f"Pending source is not a file: {source}"
            raise ValueError(msg)
        source.unlink(missing_ok=True)
        logger.debug("Discarded pending source %s", source)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> list[StoredDocument]:
        """All stored PDFs, newest first, ties broken by name.

        Entries that vanish between enumeration and the metadata read are
        skipped. A missing directory lists as empty.
        """
        if not self.directory.is_dir():
            return []

        documents: list[StoredDocument] = []
        for entry in self.directory.iterdir():
            if not has_canonical_extension(entry.name):
                continue
            try:
                if not entry.is_file():
                    continue
                documents.append(StoredDocument.from_path(entry))
            except OSError:
                logger.debug("Skipping unreadable entry %s", entry, exc_info=True)

        documents.sort(key=lambda doc: doc.name)
        documents.sort(key=lambda doc: doc.modified_at, reverse=True)
        return documents

    def get(self, document: DocumentRef) -> StoredDocument:
        """Fresh :class:`StoredDocument` for *document*, or :class:`DocumentNotFound`."""
        path = self._path_for(document)
        if not path.is_file():
            raise DocumentNotFound(path.name)
        try:
            return StoredDocument.from_path(path)
        except OSError as exc:
            raise DocumentNotFound(path.name) from exc

    def info(self, document: DocumentRef) -> DocumentMetadata:
        """Re-read size and modification time of *document*."""
        path = self._path_for(document)
        if not path.is_file():
            raise DocumentNotFound(path.name)
        try:
            return DocumentMetadata.from_path(path)
        except OSError as exc:
            raise DocumentNotFound(path.name) from exc

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def rename(self, document: DocumentRef, new_display_name: str) -> StoredDocument:
        """Give a stored document a new sanitized, collision-free name."""
        current = self.get(document)
        sanitized = self._sanitize(new_display_name, 0)
        if sanitized.name == current.name:
            return current

        destination = self.directory / self._resolve(sanitized.name)
        try:
            current.path.rename(destination)
        except FileNotFoundError as exc:
            raise DocumentNotFound(current.name) from exc
        except OSError as exc:
            raise DestinationUnwritable(destination, str(exc)) from exc
        logger.debug("Renamed %s -> %s", current.name, destination.name)
        return StoredDocument.from_path(destination)

    def delete(self, document: DocumentRef) -> bool:
        """Remove *document*. Returns False if it was already gone.

        Raises :class:`DestinationUnwritable` if the file exists but cannot
        be removed.
        """
        try:
            path = self._path_for(document)
        except DocumentNotFound:
            return False
        if not path.is_file():
            logger.debug("PDF not found, nothing to delete: %s", path)
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("PDF vanished before delete: %s", path)
            return False
        except OSError as exc:
            raise DestinationUnwritable(path, str(exc)) from exc
        logger.debug("Deleted %s", path)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _sanitize(self, raw_name: str, image_count: int) -> SanitizedName:
        sanitized = sanitize_name(
            raw_name,
            image_count,
            max_length=self._max_name_length,
            clock=self._now,
        )
        if sanitized.fallback_used:
            logger.info("Name %r unusable, using %s", raw_name, sanitized.name)
        return sanitized

    def _resolve(self, name: str) -> str:
        return resolve_name(
            self.directory,
            name,
            max_retries=self._max_retries,
            max_length=self._max_name_length,
            clock=self._clock,
        )

    def _ensure_directory(self) -> Path:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DestinationUnwritable(self.directory, str(exc)) from exc
        return self.directory

    def _path_for(self, document: DocumentRef) -> Path:
        """Map a document reference to its path inside the managed directory.

        Only bare ``*.pdf`` names address documents; anything else in the
        directory is not the store's to touch.
        """
        name = document.name if isinstance(document, StoredDocument) else str(document)
        if Path(name).name != name or not has_canonical_extension(name):
            raise DocumentNotFound(name)
        return self.directory / name


def _remove_quietly(path: Path) -> None:
    """Best-effort removal of a partial destination file."""
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not remove partial file: %s", path, exc_info=True)
