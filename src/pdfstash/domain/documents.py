"""Stored document value objects.

INVARIANT: Files are truth. Size and modification time come from the
filesystem on every read and are never cached across calls.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel


class DocumentMetadata(BaseModel):
    """Fresh snapshot of a document's filesystem attributes."""

    model_config = {"frozen": True}

    size_bytes: int
    modified_at: datetime

    @classmethod
    def from_path(cls, path: Path) -> DocumentMetadata:
        """Read size and mtime from *path*. Raises ``OSError`` if it is gone."""
        st = path.stat()
        return cls(
            size_bytes=st.st_size,
            modified_at=datetime.fromtimestamp(st.st_mtime, tz=UTC),
        )


class StoredDocument(BaseModel):
    """A PDF that exists in the managed directory.

    Attributes:
        name: Document name, unique within the managed directory.
        path: Absolute location of the file.
        size_bytes: Size at the time of the read that produced this object.
        modified_at: Modification time (UTC) at the time of that read.
    """

    model_config = {"frozen": True}

    name: str
    path: Path
    size_bytes: int
    modified_at: datetime

    @classmethod
    def from_path(cls, path: Path) -> StoredDocument:
        meta = DocumentMetadata.from_path(path)
        return cls(
            name=path.name,
            path=path,
            size_bytes=meta.size_bytes,
            modified_at=meta.modified_at,
        )

    @property
    def id(self) -> str:
        """List key combining name and mtime, e.g. ``report.pdf_1700000000000``."""
        return f"{self.name}_{int(self.modified_at.timestamp() * 1000)}"

    @property
    def size_formatted(self) -> str:
        return format_size(self.size_bytes)

    @property
    def display_date(self) -> str:
        return format_date(self.modified_at)

    def summary(self) -> dict[str, object]:
        """Flat dict for service payloads."""
        return {
            "id": self.id,
            "name": self.name,
            "path": str(self.path),
            "size_bytes": self.size_bytes,
            "size": self.size_formatted,
            "modified_at": self.modified_at.isoformat(),
            "date": self.display_date,
        }


def format_size(size_bytes: int) -> str:
    """Human size in KB below one megabyte, MB above.

    Examples:
        >>> format_size(0)
        '0 KB'
        >>> format_size(2048)
        '2.0 KB'
        >>> format_size(3 * 1024 * 1024)
        '3.0 MB'
    """
    if not size_bytes:
        return "0 KB"
    kb = size_bytes / 1024
    if kb < 1024:
        return f"{kb:.1f} KB"
    return f"{kb / 1024:.1f} MB"


def format_date(moment: datetime) -> str:
    """Short display date, e.g. ``Mar 5, 2024``."""
    local = moment.astimezone()
    return f"{local.strftime('%b')} {local.day}, {local.year}"
