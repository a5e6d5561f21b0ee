"""
Core modules for reading and writing person record files.

This package contains the reader and writer programs built on the io layer.
"""

from .reader import PeopleFileReader, ReadReport
from .writer import DEFAULT_PERSON, PeopleFileWriter

__all__ = [
    # Reading
    "PeopleFileReader",
    "ReadReport",
    # Writing
    "PeopleFileWriter",
    "DEFAULT_PERSON",
]
