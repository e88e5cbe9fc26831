"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from tmplhier.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="resolve", data={"template": "index.php"})
        assert result.ok is True
        assert result.data == {"template": "index.php"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        result = ServiceResult(
            ok=False, op="resolve", error=ServiceError(code="E001", message="Bad request")
        )
        assert result.error is not None
        assert result.error.code == "E001"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="types", data={"types": ["embed"]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["op"] == "types"
        assert parsed["data"]["types"] == ["embed"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="resolve")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
