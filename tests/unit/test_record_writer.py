from pathlib import Path

import pytest

from person_records.io.record_stream import RecordStream
from person_records.io.record_writer import RecordWriter, WriteMode
from person_records.models.person import Person
from person_records.utils.exceptions import FileOpenError, FileWriteError

VADER = Person.create("Darth", "Vader", "Imperial-Lord", 40)
VADER_LINE = "Darth Vader Imperial-Lord 40\n"


def test_truncate_into_empty_file(tmp_path: Path):
    target = tmp_path / "out.txt"
    target.write_text("")

    written = RecordWriter().write_person(target, VADER, WriteMode.TRUNCATE)

    assert target.read_text() == VADER_LINE
    assert written == len(VADER_LINE)


def test_truncate_creates_missing_file(tmp_path: Path):
    target = tmp_path / "new.txt"

    RecordWriter().write_person(target, VADER)

    assert target.read_text() == VADER_LINE


def test_truncate_discards_prior_content(make_file):
    target = make_file("Luke Skywalker Jedi 19\nHan Solo Smuggler 32\n" * 50)

    RecordWriter().write_person(target, VADER, WriteMode.TRUNCATE)

    assert target.read_text().splitlines() == ["Darth Vader Imperial-Lord 40"]


def test_append_preserves_prior_bytes(make_file):
    prior = "Luke Skywalker Jedi 19\n"
    target = make_file(prior)
    old_size = target.stat().st_size

    RecordWriter().write_person(target, VADER, WriteMode.APPEND)

    assert target.stat().st_size == old_size + len(VADER_LINE.encode("utf-8"))
    assert target.read_bytes() == (prior + VADER_LINE).encode("utf-8")


def test_append_twice_accumulates(tmp_path: Path):
    target = tmp_path / "append.txt"
    writer = RecordWriter()

    writer.write_person(target, VADER, WriteMode.APPEND)
    writer.write_person(target, VADER, WriteMode.APPEND)

    assert target.read_text() == VADER_LINE * 2


def test_line_terminator_is_not_translated(tmp_path: Path):
    target = tmp_path / "out.txt"

    RecordWriter().write_person(target, VADER)

    assert target.read_bytes().endswith(b"40\n")
    assert b"\r" not in target.read_bytes()


def test_open_failure_raises_file_open_error(tmp_path: Path):
    with pytest.raises(FileOpenError) as exc_info:
        RecordWriter().write_person(tmp_path / "missing-dir" / "out.txt", VADER)

    assert exc_info.value.mode == "truncate"


def test_open_failure_on_directory(tmp_path: Path):
    with pytest.raises(FileOpenError):
        RecordWriter().write_person(tmp_path, VADER, WriteMode.APPEND)


def test_written_files_are_valid_reader_input(tmp_path: Path):
    target = tmp_path / "out.txt"
    writer = RecordWriter()
    luke = Person.create("Luke", "Skywalker", "Jedi", 19)
    writer.write_person(target, luke, WriteMode.TRUNCATE)
    writer.write_person(target, VADER, WriteMode.APPEND)

    with RecordStream.open(target) as stream:
        assert list(stream.scan_people()) == [luke, VADER]


def test_unencodable_record_raises_write_error_and_keeps_file(make_file):
    target = make_file("Luke Skywalker Jedi 19\n")
    jose = Person.create("José", "Luis", "Pilot", 30)

    with pytest.raises(FileWriteError):
        RecordWriter(encoding="ascii").write_person(target, jose, WriteMode.TRUNCATE)

    assert target.read_text() == "Luke Skywalker Jedi 19\n"


def test_unknown_encoding_raises_open_error(tmp_path: Path):
    target = tmp_path / "out.txt"

    with pytest.raises(FileOpenError) as exc_info:
        RecordWriter(encoding="no-such-codec").write_person(target, VADER)

    assert exc_info.value.mode == "truncate"
    assert not target.exists()
