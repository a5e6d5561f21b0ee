"""
Pytest configuration for person record tests.

Provides fixtures for:
- Record files written to a temporary directory
- Reader and writer configurations pointing at them
"""

from __future__ import annotations

from pathlib import Path

import pytest

from person_records.models.config import ReaderConfig, WriterConfig

LUKE_LINE = "Luke Skywalker Jedi 19\n"

WELL_FORMED_LINES = [
    "Luke Skywalker Jedi 19\n",
    "Leia Organa Senator 19\n",
    "Han Solo Smuggler 32\n",
]


@pytest.fixture
def make_file(tmp_path: Path):
    """Factory writing text to a file under tmp_path and returning its path."""

    def _make(text: str, name: str = "people.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _make


@pytest.fixture
def luke_file(make_file) -> Path:
    """
    Input file containing exactly one record line.
    """
    return make_file(LUKE_LINE, "people-to-read.txt")


@pytest.fixture
def people_file(make_file) -> Path:
    return make_file("".join(WELL_FORMED_LINES))


@pytest.fixture
def reader_config(luke_file: Path) -> ReaderConfig:
    return ReaderConfig(input_file=luke_file)


@pytest.fixture
def writer_config(tmp_path: Path) -> WriterConfig:
    return WriterConfig(
        overwrite_file=tmp_path / "people-to-overwrite.txt",
        append_file=tmp_path / "people-to-append-to.txt",
    )
