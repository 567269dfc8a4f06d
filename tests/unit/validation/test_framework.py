"""Tests for validation report types."""

import pytest

from structval.validation.framework import (
    INVALID_DATA,
    InvalidDataError,
    ValidationError,
    ValidationResult,
    ValidationStatus,
)


class TestValidationError:
    """Test ValidationError rendering."""

    def test_single_field(self):
        error = ValidationError([".A.AA"], "not allow empty")
        assert str(error) == "`.A.AA` not allow empty"
        assert error.code == INVALID_DATA

    def test_multiple_fields(self):
        error = ValidationError([".Email", ".Phone"], "at least one of [.Email,.Phone] should be valued")
        assert str(error) == "`.Email`,`.Phone` at least one of [.Email,.Phone] should be valued"


class TestValidationResult:
    """Test ValidationResult aggregation."""

    def test_empty_result_passes(self):
        result = ValidationResult()
        assert result.ok
        assert result.status == ValidationStatus.PASS
        assert result.exit_code == 0
        assert str(result) == ""
        assert len(result) == 0

    def test_add_error_fails(self):
        result = ValidationResult()
        result.add_error([".B"], "not allow empty")

        assert not result.ok
        assert result.status == ValidationStatus.FAIL
        assert result.exit_code == 1
        assert result[0].fields == [".B"]

    def test_errors_keep_insertion_order(self):
        result = ValidationResult()
        result.add_error([".PtrIntId"], "not allow empty")
        result.add_error([".Str"], "not allow empty")

        assert [error.fields[0] for error in result] == [".PtrIntId", ".Str"]
        assert str(result) == "[invalid-data] `.PtrIntId` not allow empty; `.Str` not allow empty"

    def test_counters(self):
        result = ValidationResult()
        result.increment_counter("nodes_evaluated")
        result.increment_counter("nodes_evaluated", 2)
        assert result.counters == {"nodes_evaluated": 3}

    def test_to_dict(self):
        result = ValidationResult()
        result.add_error([".min"], "should be greater than equal [5], current value is [2]")

        data = result.to_dict()
        assert data["status"] == "fail"
        assert data["exit_code"] == 1
        assert data["errors"] == [{
            "fields": [".min"],
            "message": "should be greater than equal [5], current value is [2]",
            "code": INVALID_DATA,
        }]

    def test_raise_for_errors(self):
        result = ValidationResult()
        result.raise_for_errors()

        result.add_error([".B"], "not allow empty")
        with pytest.raises(InvalidDataError) as exc_info:
            result.raise_for_errors()

        assert exc_info.value.result is result
        assert exc_info.value.code == INVALID_DATA
        assert exc_info.value.errors == result.errors
        assert str(exc_info.value) == "[invalid-data] `.B` not allow empty"

    def test_invalid_data_error_is_value_error(self):
        result = ValidationResult()
        result.add_error([".B"], "not allow empty")
        with pytest.raises(ValueError):
            result.raise_for_errors()
