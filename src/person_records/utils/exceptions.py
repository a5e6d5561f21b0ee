"""
Custom exceptions for the person record reader and writer.
"""

from typing import Optional


class RecordFileError(Exception):
    """Base exception for person record file errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class FileOpenError(RecordFileError):
    """Exception raised when a source or destination file cannot be opened."""

    def __init__(
        self, message: str, path: Optional[str] = None, mode: Optional[str] = None
    ):
        details = {}
        if path:
            details["path"] = path
        if mode:
            details["mode"] = mode
        super().__init__(message, details)
        self.path = path
        self.mode = mode


class StreamReadError(RecordFileError):
    """Exception raised when a single read from an open stream fails.

    Read failures are recoverable: the stream latches into a failed state
    and the caller decides whether to report and move on or stop a loop.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        file_path: Optional[str] = None,
    ):
        details = {}
        if operation:
            details["operation"] = operation
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details)
        self.operation = operation
        self.file_path = file_path


class EndOfStreamError(StreamReadError):
    """Exception raised when a read hits end-of-file before producing a value."""


class FileWriteError(RecordFileError):
    """Exception raised when writing to an open destination fails."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        details = {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details)
        self.file_path = file_path


def handle_record_error(
    error: Exception, context: Optional[dict] = None
) -> RecordFileError:
    """Convert generic exceptions to RecordFileError with context."""
    if isinstance(error, RecordFileError):
        return error

    error_context = context or {}

    if isinstance(error, FileNotFoundError):
        return FileOpenError(
            f"File not found: {error.filename or error}",
            path=error_context.get("path"),
            mode=error_context.get("mode"),
        )
    elif isinstance(error, PermissionError):
        return FileOpenError(
            f"Permission denied: {error.filename or error}",
            path=error_context.get("path"),
            mode=error_context.get("mode"),
        )
    elif isinstance(error, IsADirectoryError):
        return FileOpenError(
            f"Is a directory: {error.filename or error}",
            path=error_context.get("path"),
            mode=error_context.get("mode"),
        )
    elif isinstance(error, UnicodeDecodeError):
        return StreamReadError(
            f"Encoding error: {error}",
            operation=error_context.get("operation"),
            file_path=error_context.get("path"),
        )
    elif isinstance(error, OSError):
        return FileOpenError(
            f"Failed to open file: {error}",
            path=error_context.get("path"),
            mode=error_context.get("mode"),
        )
    else:
        error_context["original_error"] = str(error)
        error_context["error_type"] = type(error).__name__
        return RecordFileError(f"Unexpected error: {error}", details=error_context)
