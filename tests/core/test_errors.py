"""Tests for core error types."""

from __future__ import annotations

import pytest

from sagit.core.errors import (
    ConfigError,
    ErrorCode,
    MetaStoreError,
    ParseFailure,
    RuleLoadError,
    SagitError,
)


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("code", "prefix"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2),
            (ErrorCode.CONFIG_INVALID_VALUE, 2),
            (ErrorCode.STORE_IO_FAILURE, 4),
            (ErrorCode.RULE_LOAD_FAILURE, 5),
            (ErrorCode.PARSE_FAILURE, 6),
        ],
    )
    def test_code_ranges(self, code: ErrorCode, prefix: int) -> None:
        assert code.value // 1000 == prefix


class TestSagitError:
    def test_given_store_failure_when_to_dict_then_structured(self) -> None:
        # Given
        err = MetaStoreError.io_failure("/tmp/meta.jsonl", "append", "disk full")

        # When
        data = err.to_dict()

        # Then
        assert data == {
            "code": 4001,
            "error": "STORE_IO_FAILURE",
            "message": "Metadata append failed for /tmp/meta.jsonl: disk full",
            "details": {"path": "/tmp/meta.jsonl", "operation": "append", "reason": "disk full"},
        }

    def test_str_is_message(self) -> None:
        err = ConfigError.parse_error("config.json", "bad json")
        assert str(err) == "Failed to parse config at config.json: bad json"

    def test_is_raisable(self) -> None:
        with pytest.raises(SagitError) as exc_info:
            raise RuleLoadError.bad_pattern(3, "(", "missing )")
        assert exc_info.value.details["line"] == 3
        assert exc_info.value.error_name == "RULE_LOAD_FAILURE"

    def test_parse_failure_details(self) -> None:
        err = ParseFailure.syntax("java", 2)
        assert err.code is ErrorCode.PARSE_FAILURE
        assert err.details == {"language": "java", "error_count": 2}

    def test_invalid_value_stringifies_value(self) -> None:
        err = ConfigError.invalid_value("languages", 42, "not a list")
        assert err.details["value"] == "42"

