"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the application."""

    # Storage errors
    STORAGE_READ_FAILED = "STORAGE_READ_FAILED"
    STORAGE_WRITE_FAILED = "STORAGE_WRITE_FAILED"

    # Persisted data errors
    CORRUPT_TASK_DATA = "CORRUPT_TASK_DATA"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(self.message)


class StorageError(AppException):
    """A storage slot could not be read or written."""

    def __init__(
        self,
        key: str,
        message: str = "Storage slot unavailable",
        error_code: ErrorCode = ErrorCode.STORAGE_READ_FAILED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=f"{message}: {key}",
            details={"key": key},
        )


class StorageWriteError(StorageError):
    """Writing a storage slot failed."""

    def __init__(self, key: str) -> None:
        super().__init__(
            key=key,
            message="Could not write storage slot",
            error_code=ErrorCode.STORAGE_WRITE_FAILED,
        )


class StorageReadError(StorageError):
    """Reading a storage slot failed."""

    def __init__(self, key: str) -> None:
        super().__init__(
            key=key,
            message="Could not read storage slot",
            error_code=ErrorCode.STORAGE_READ_FAILED,
        )


class CorruptTaskDataError(AppException):
    """Persisted task data does not match the task record schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.CORRUPT_TASK_DATA,
            message="Stored task data is unreadable",
            details={"reason": reason},
        )
