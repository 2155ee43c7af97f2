"""Error models"""

from enum import Enum
from typing import Optional
import uuid


class ErrorCode(str, Enum):
    """Error codes"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    COMPLETION_FAILED = "COMPLETION_FAILED"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ARCHIVE_EMPTY = "ARCHIVE_EMPTY"


class ApplicationError(Exception):
    """Application error"""
    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: Optional[ErrorCode] = None, retryable: bool = False, hint: Optional[str] = None):
        self.error_id = str(uuid.uuid4())
        if code is not None:
            self.code = code
        self.message = message
        self.retryable = retryable
        self.hint = hint
        super().__init__(self.message)

    def model_dump(self):
        """Return dict representation for API responses"""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "message": self.message,
            "hint": self.hint,
            "retryable": self.retryable,
        }

    @property
    def http_status(self) -> int:
        """Map error code to HTTP status"""
        mapping = {
            ErrorCode.INTERNAL_ERROR: 500,
            ErrorCode.VALIDATION_ERROR: 400,
            ErrorCode.NOT_FOUND: 404,
            ErrorCode.ARCHIVE_EMPTY: 404,
            ErrorCode.COMPLETION_FAILED: 502,
            ErrorCode.CONFIGURATION_ERROR: 500,
            ErrorCode.STORAGE_ERROR: 500,
        }
        return mapping.get(self.code, 500)


class ValidationError(ApplicationError):
    """A required request field is missing or unusable."""
    code = ErrorCode.VALIDATION_ERROR


class CompletionError(ApplicationError):
    """The completion provider call failed or returned nothing usable."""
    code = ErrorCode.COMPLETION_FAILED


class ArtifactIOError(ApplicationError):
    """Reading or writing the artifact on disk failed."""
    code = ErrorCode.STORAGE_ERROR


class NotFoundError(ApplicationError):
    """No artifact has been generated yet."""
    code = ErrorCode.NOT_FOUND


class ArchiveError(ApplicationError):
    """Nothing to compress."""
    code = ErrorCode.ARCHIVE_EMPTY
