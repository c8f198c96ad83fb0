"""Unit tests for operation results."""

from todolists.models.result import ErrorKind
from todolists.models.result import Result


def test_success_result_is_ok():
    result = Result.success(42)
    assert result.ok
    assert result.value == 42
    assert result.error is None
    assert result.message is None


def test_invalid_result_carries_message():
    result = Result.invalid("Name too long.")
    assert not result.ok
    assert result.error == ErrorKind.VALIDATION
    assert result.message == "Name too long."
    assert result.value is None


def test_not_found_result():
    result = Result.not_found("Missing.")
    assert not result.ok
    assert result.error == ErrorKind.NOT_FOUND


def test_error_kinds_are_strings():
    assert ErrorKind.VALIDATION == "validation"
    assert ErrorKind.NOT_FOUND == "not_found"
