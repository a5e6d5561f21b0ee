"""
Utility modules for the person record reader and writer.
"""

from .exceptions import (
    EndOfStreamError,
    FileOpenError,
    FileWriteError,
    RecordFileError,
    StreamReadError,
    handle_record_error,
)
from .logging import LoggerMixin, get_logger, setup_logging

__all__ = [
    "RecordFileError",
    "FileOpenError",
    "StreamReadError",
    "EndOfStreamError",
    "FileWriteError",
    "handle_record_error",
    "setup_logging",
    "get_logger",
    "LoggerMixin",
]
