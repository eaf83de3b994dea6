"""Tests for stored document value objects."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from pdfstash.domain.documents import DocumentMetadata, StoredDocument, format_date, format_size


class TestFormatSize:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 KB"),
            (512, "0.5 KB"),
            (1536, "1.5 KB"),
            (1024 * 1023, "1023.0 KB"),
            (1024 * 1024, "1.0 MB"),
            (5 * 1024 * 1024 + 512 * 1024, "5.5 MB"),
        ],
    )
    def test_sizes(self, size: int, expected: str) -> None:
        assert format_size(size) == expected


class TestFormatDate:
    def test_short_month_format(self) -> None:
        moment = datetime(2024, 3, 5, 12, 0).astimezone()
        assert format_date(moment) == "Mar 5, 2024"


class TestStoredDocument:
    def test_from_path_reads_metadata(self, tmp_path: Path) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"12345")
        doc = StoredDocument.from_path(path)
        assert doc.name == "a.pdf"
        assert doc.path == path
        assert doc.size_bytes == 5
        assert doc.modified_at.tzinfo is not None

    def test_from_path_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            StoredDocument.from_path(tmp_path / "gone.pdf")

    def test_id_combines_name_and_mtime(self) -> None:
        doc = StoredDocument(
            name="a.pdf",
            path=Path("/x/a.pdf"),
            size_bytes=1,
            modified_at=datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC),
        )
        assert doc.id == "a.pdf_1700000000000"

    def test_frozen(self, tmp_path: Path) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"x")
        doc = StoredDocument.from_path(path)
        with pytest.raises(Exception):
            doc.name = "b.pdf"  # type: ignore[misc]

    def test_summary_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"x" * 2048)
        summary = StoredDocument.from_path(path).summary()
        assert summary["name"] == "a.pdf"
        assert summary["size"] == "2.0 KB"
        assert summary["size_bytes"] == 2048
        assert set(summary) >= {"id", "path", "modified_at", "date"}


class TestDocumentMetadata:
    def test_fresh_read_sees_growth(self, tmp_path: Path) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"x")
        first = DocumentMetadata.from_path(path)
        path.write_bytes(b"xxxx")
        second = DocumentMetadata.from_path(path)
        assert first.size_bytes == 1
        assert second.size_bytes == 4
