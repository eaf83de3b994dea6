"""Shared pytest fixtures and test helpers for pdfstash tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from pdfstash.infrastructure.store import DocumentStore
from pdfstash.services.documents import DocumentService

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    stash = logging.getLogger("pdfstash")
    stash_level = stash.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    stash.setLevel(stash_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Managed directory for one test (created on first commit)."""
    return tmp_path / "documents"


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Where the fake renderer drops pending PDFs."""
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def store(store_dir: Path) -> DocumentStore:
    return DocumentStore(store_dir, now=lambda: datetime(2024, 3, 5, 10, 15, 0))


@pytest.fixture
def service(store: DocumentStore) -> DocumentService:
    return DocumentService(store)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config env vars."""
    for var in ("PDFSTASH_CONFIG", "PDFSTASH_DIRECTORY", "PDFSTASH_STORE__DIRECTORY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_pdf(directory: Path, name: str = "render.pdf", content: bytes = PDF_BYTES) -> Path:
    """Write a small PDF-looking file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(content)
    return path


def set_mtime(path: Path, epoch_seconds: float) -> None:
    """Pin a file's modification time so ordering tests are deterministic."""
    os.utime(path, (epoch_seconds, epoch_seconds))
