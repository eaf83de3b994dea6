"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from pdfstash.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("pdfstash").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("pdfstash").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("pdfstash.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "pdfstash.test"
        assert "timestamp" in parsed

    def test_store_logger_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("pdfstash.infrastructure.store").debug("Deleted %s", "a.pdf")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Deleted a.pdf"
        assert parsed["level"] == "debug"

    def test_json_mode_renders_tracebacks(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        try:
            raise OSError("disk full")
        except OSError:
            logging.getLogger("pdfstash.infrastructure.store").warning(
                "Could not delete source file", exc_info=True
            )
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Could not delete source file"
        assert "disk full" in parsed["exception"]

    def test_third_party_loggers_stay_quiet(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("urllib3").getEffectiveLevel() == logging.WARNING

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
