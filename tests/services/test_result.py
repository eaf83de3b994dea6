"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest

from pdfstash.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="list")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("commit", "SOURCE_NOT_FOUND", "missing", path="/tmp/x.pdf")
        assert result.ok is False
        assert result.error == ServiceError(
            code="SOURCE_NOT_FOUND", message="missing", detail={"path": "/tmp/x.pdf"}
        )

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="list")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip_shape(self) -> None:
        result = ServiceResult(ok=True, op="delete", data={"deleted": False}, warnings=["gone"])
        dumped = result.model_dump()
        assert dumped["data"] == {"deleted": False}
        assert dumped["warnings"] == ["gone"]
