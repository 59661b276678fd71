"""Tests for MetaRecord / MetaSummary decoding."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from sagit.meta.models import MetaRecord, MetaSummary


class TestMetaSummary:
    def test_absent_keys_default_to_zero(self) -> None:
        summary = MetaSummary.model_validate({"files_added": 1})
        assert summary == MetaSummary(files_added=1)
        assert summary.structural_methods_delta == 0

    def test_legacy_java_keys(self) -> None:
        summary = MetaSummary.model_validate({"java_types_delta": 2, "java_methods_delta": -1})
        assert summary.structural_types_delta == 2
        assert summary.structural_methods_delta == -1

    def test_unknown_keys_ignored(self) -> None:
        assert MetaSummary.model_validate({"lines": 10}) == MetaSummary()


class TestMetaRecord:
    def test_json_line_uses_commit_id_key(self) -> None:
        record = MetaRecord(commit_id="abc", timestamp="2024-01-02T03:04:05Z")

        data = json.loads(record.to_json_line())

        assert data["commitId"] == "abc"
        assert set(data["summary"]) == {
            "files_added",
            "files_modified",
            "files_deleted",
            "structural_types_delta",
            "structural_methods_delta",
        }

    def test_decode_by_alias(self) -> None:
        record = MetaRecord.model_validate_json('{"commitId": "abc", "timestamp": "t"}')
        assert record.commit_id == "abc"
        assert record.summary == MetaSummary()

    def test_commit_id_required(self) -> None:
        with pytest.raises(ValidationError):
            MetaRecord.model_validate_json('{"timestamp": "t"}')

    def test_for_commit_uses_utc_commit_time(self) -> None:
        record = MetaRecord.for_commit("abc", 1704164645, {"files_added": 2})

        assert record.timestamp == "2024-01-02T03:04:05Z"
        assert record.summary.files_added == 2

    def test_to_row(self) -> None:
        record = MetaRecord(
            commit_id="abc",
            timestamp="t",
            summary=MetaSummary(files_added=1, structural_types_delta=-2),
        )
        assert record.to_row() == ["abc", "t", "1", "0", "0", "-2", "0"]
