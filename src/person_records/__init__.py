"""
Person Records

Reads and writes line-oriented person record files, one
``first_name last_name job age`` record per line.
"""

__version__ = "1.0.0"

from .core.reader import PeopleFileReader, ReadReport
from .core.writer import PeopleFileWriter
from .io.record_stream import RecordStream, StreamState
from .io.record_writer import RecordWriter, WriteMode
from .models.config import ReaderConfig, WriterConfig
from .models.person import Person

__all__ = [
    "PeopleFileReader",
    "PeopleFileWriter",
    "ReadReport",
    "RecordStream",
    "StreamState",
    "RecordWriter",
    "WriteMode",
    "ReaderConfig",
    "WriterConfig",
    "Person",
]
