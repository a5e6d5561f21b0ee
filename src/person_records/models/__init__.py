"""
Data models and configuration schemas for person record files.
"""

from .config import ReaderConfig, WriterConfig
from .person import Person

__all__ = [
    "Person",
    "ReaderConfig",
    "WriterConfig",
]
