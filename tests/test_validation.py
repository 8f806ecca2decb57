"""
Tests for issue payload validation and boolean parsing.
"""

import pytest

from core.validation import parse_bool, validate_new_issue


class TestValidateNewIssue:
    """Tests for validate_new_issue."""

    def test_complete_payload_is_valid(self, sample_issue_fields):
        result = validate_new_issue(sample_issue_fields)

        assert result.valid is True
        assert result.fields == sample_issue_fields
        assert result.missing == []

    def test_unknown_fields_are_dropped(self, sample_issue_fields):
        payload = {**sample_issue_fields, "open": False, "_id": 3, "projectname": "other"}

        result = validate_new_issue(payload)

        assert result.valid is True
        assert set(result.fields) == set(sample_issue_fields)

    def test_empty_payload_lists_every_required_field(self):
        result = validate_new_issue({})

        assert result.valid is False
        assert result.missing == ["issue_title", "issue_text", "created_by"]
        assert result.fields == {}

    def test_empty_string_counts_as_missing(self, sample_issue_fields):
        result = validate_new_issue({**sample_issue_fields, "created_by": ""})

        assert result.valid is False
        assert result.missing == ["created_by"]

    def test_optional_fields_may_be_omitted_or_null(self):
        payload = {"issue_title": "T", "issue_text": "X", "created_by": "C", "status_text": None}

        result = validate_new_issue(payload)

        assert result.valid is True
        assert result.fields == {"issue_title": "T", "issue_text": "X", "created_by": "C"}

    def test_optional_fields_may_be_empty_strings(self):
        payload = {"issue_title": "T", "issue_text": "X", "created_by": "C", "assigned_to": ""}

        assert validate_new_issue(payload).valid is True

    def test_non_string_values_are_invalid(self, sample_issue_fields):
        result = validate_new_issue({**sample_issue_fields, "issue_title": 42, "assigned_to": ["x"]})

        assert result.valid is False
        assert result.invalid == ["issue_title", "assigned_to"]


class TestParseBool:
    """Tests for parse_bool."""

    @pytest.mark.parametrize(
        "value, expected",
        [("true", True), ("false", False), (True, True), (False, False), ("yes", False), ("", False), (None, False), ("True", False)],
    )
    def test_lenient(self, value, expected):
        assert parse_bool(value) is expected

    @pytest.mark.parametrize("value", ["yes", "1", 1, None])
    def test_strict_rejects_anything_else(self, value):
        with pytest.raises(ValueError):
            parse_bool(value, strict=True)

    def test_strict_accepts_literals(self):
        assert parse_bool("false", strict=True) is False
        assert parse_bool(" true ", strict=True) is True
