"""
Input/Output modules for person record files.

This package handles opening record files, reading them token by token,
line by line or record by record, and writing records back out.
"""

from .encoding import detect_encoding
from .record_stream import RecordStream, StreamState
from .record_writer import RecordWriter, WriteMode

__all__ = [
    # Encoding detection
    "detect_encoding",
    # Reading
    "RecordStream",
    "StreamState",
    # Writing
    "RecordWriter",
    "WriteMode",
]
