"""Tests for collision resolution in the managed directory."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from pdfstash.infrastructure.collisions import resolve_name, timestamped_name
from pdfstash.infrastructure.errors import CollisionUnresolved


def _clock(*values: int) -> Callable[[], int]:
    it: Iterator[int] = iter(values)
    last = [0]

    def tick() -> int:
        last[0] = next(it, last[0])
        return last[0]

    return tick


class TestTimestampedName:
    def test_inserts_before_extension(self) -> None:
        assert timestamped_name("Invoice.pdf", 1700000000000) == "Invoice_1700000000000.pdf"

    def test_keeps_extension_casing(self) -> None:
        assert timestamped_name("Scan.PDF", 42) == "Scan_42.PDF"

    def test_respects_max_length(self) -> None:
        name = "z" * 96 + ".pdf"
        result = timestamped_name(name, 1700000000000, max_length=100)
        assert len(result) == 100
        assert result.endswith("_1700000000000.pdf")


class TestResolveName:
    def test_free_name_returned_unchanged(self, tmp_path: Path) -> None:
        assert resolve_name(tmp_path, "Invoice.pdf") == "Invoice.pdf"

    def test_missing_directory_means_free(self, tmp_path: Path) -> None:
        assert resolve_name(tmp_path / "nope", "Invoice.pdf") == "Invoice.pdf"

    def test_collision_gets_timestamp(self, tmp_path: Path) -> None:
        (tmp_path / "Invoice.pdf").write_bytes(b"x")
        result = resolve_name(tmp_path, "Invoice.pdf", clock=_clock(1000))
        assert result == "Invoice_1000.pdf"

    def test_never_returns_existing_name(self, tmp_path: Path) -> None:
        for name in ("Invoice.pdf", "Invoice_1000.pdf", "Invoice_1001.pdf"):
            (tmp_path / name).write_bytes(b"x")
        result = resolve_name(tmp_path, "Invoice.pdf", clock=_clock(1000, 1001, 1002))
        assert result == "Invoice_1002.pdf"
        assert not (tmp_path / result).exists()

    def test_same_tick_is_bumped(self, tmp_path: Path) -> None:
        """A frozen clock still yields strictly increasing stamps."""
        (tmp_path / "Invoice.pdf").write_bytes(b"x")
        (tmp_path / "Invoice_5000.pdf").write_bytes(b"x")
        result = resolve_name(tmp_path, "Invoice.pdf", clock=lambda: 5000)
        assert result == "Invoice_5001.pdf"

    def test_clock_resampled_each_retry(self, tmp_path: Path) -> None:
        calls: list[int] = []

        def clock() -> int:
            calls.append(1)
            return 7000 + len(calls) * 10

        (tmp_path / "Invoice.pdf").write_bytes(b"x")
        (tmp_path / "Invoice_7010.pdf").write_bytes(b"x")
        assert resolve_name(tmp_path, "Invoice.pdf", clock=clock) == "Invoice_7020.pdf"
        assert len(calls) == 2

    def test_bounded_retries(self, tmp_path: Path) -> None:
        (tmp_path / "Invoice.pdf").write_bytes(b"x")
        for stamp in range(100, 103):
            (tmp_path / f"Invoice_{stamp}.pdf").write_bytes(b"x")
        with pytest.raises(CollisionUnresolved) as excinfo:
            resolve_name(tmp_path, "Invoice.pdf", max_retries=3, clock=lambda: 100)
        assert excinfo.value.code == "COLLISION_UNRESOLVED"
        assert excinfo.value.attempts == 4
