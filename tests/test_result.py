"""
Tests for typewarden.result.
"""

import pytest

from typewarden import Err, Ok, String, ValidationError, ValidationResult, failure, success


class TestValidationResult:
    def test_success(self):
        result = success(1)
        assert result.is_valid()
        assert result.first_error() is None
        assert result.value == 1
        assert result.errors == ()

    def test_success_shares_empty_errors(self):
        assert success(1).errors is success(2).errors

    def test_failure(self):
        first = ValidationError("first", 1, String, ("a",))
        second = ValidationError("second", 2, String, ("b",))
        result = failure({"a": 1, "b": 2}, [first, second])
        assert not result.is_valid()
        assert result.first_error() is first
        assert result.error_messages() == ["first", "second"]
        assert result.value == {"a": 1, "b": 2}

    def test_failure_requires_errors(self):
        with pytest.raises(ValueError):
            failure(1, [])

    def test_frozen(self):
        result = success(1)
        with pytest.raises(AttributeError):
            result.value = 2

    def test_to_result(self):
        assert success(1).to_result() == Ok(1)
        err = ValidationError("bad", 1, String)
        assert failure(1, [err]).to_result() == Err((err,))

    def test_error_str(self):
        assert str(ValidationError("bad", 1, String)) == "bad"

    def test_default_is_valid(self):
        assert ValidationResult(value=None).is_valid()
