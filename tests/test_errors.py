"""Tests for application error models"""
import pytest

from sitegen_api.models.errors import (
    ApplicationError,
    ArchiveError,
    ArtifactIOError,
    CompletionError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize("error_cls,code,status", [
    (ApplicationError, ErrorCode.INTERNAL_ERROR, 500),
    (ValidationError, ErrorCode.VALIDATION_ERROR, 400),
    (CompletionError, ErrorCode.COMPLETION_FAILED, 502),
    (ArtifactIOError, ErrorCode.STORAGE_ERROR, 500),
    (NotFoundError, ErrorCode.NOT_FOUND, 404),
    (ArchiveError, ErrorCode.ARCHIVE_EMPTY, 404),
])
def test_codes_and_statuses(error_cls, code, status):
    error = error_cls("message")
    assert error.code == code
    assert error.http_status == status
    assert isinstance(error, ApplicationError)


def test_explicit_code_overrides_class_default():
    error = CompletionError("no key", code=ErrorCode.CONFIGURATION_ERROR)
    assert error.code == ErrorCode.CONFIGURATION_ERROR
    assert error.http_status == 500
    assert CompletionError("other").code == ErrorCode.COMPLETION_FAILED


def test_model_dump():
    error = CompletionError("call failed", retryable=True, hint="try again")

    dumped = error.model_dump()

    assert dumped["code"] == "COMPLETION_FAILED"
    assert dumped["message"] == "call failed"
    assert dumped["hint"] == "try again"
    assert dumped["retryable"] is True
    assert dumped["error_id"]
    assert str(error) == "call failed"
