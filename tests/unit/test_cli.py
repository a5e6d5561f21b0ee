from pathlib import Path

import pytest

from person_records.__main__ import main, read_main, write_main
from person_records.utils.logging import setup_logging


def test_reader_exits_zero_on_success(luke_file: Path, capsys):
    read_main([str(luke_file)])

    captured = capsys.readouterr()
    assert "Read this string: Luke" in captured.out
    assert "Name: Luke Skywalker\tJob: Jedi\tAge: 19" in captured.out


def test_reader_missing_file_exits_nonzero(tmp_path: Path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        read_main([str(tmp_path / "missing.txt")])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error: ")
    assert "missing.txt" in captured.err
    assert captured.out == ""


def test_writer_writes_both_files(tmp_path: Path, capsys):
    overwrite = tmp_path / "over.txt"
    append = tmp_path / "append.txt"
    overwrite.write_text("old content\n")

    write_main([str(overwrite), str(append)])

    assert overwrite.read_text() == "Darth Vader Imperial-Lord 40\n"
    assert append.read_text() == "Darth Vader Imperial-Lord 40\n"
    assert "Overwrote" in capsys.readouterr().out


def test_writer_open_failure_exits_nonzero(tmp_path: Path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        write_main([str(tmp_path / "nope" / "a.txt"), str(tmp_path / "b.txt")])

    assert exc_info.value.code == 1
    assert "Error: " in capsys.readouterr().err


def test_combined_entry_point_read(luke_file: Path, capsys):
    main(["read", str(luke_file)])

    assert "Read this char: L" in capsys.readouterr().out


def test_combined_entry_point_write_then_read(tmp_path: Path, capsys):
    overwrite = tmp_path / "over.txt"
    append = tmp_path / "append.txt"

    main(["write", str(overwrite), str(append)])
    main(["read", str(overwrite)])

    assert "Name: Darth Vader\tJob: Imperial-Lord\tAge: 40" in capsys.readouterr().out


def test_combined_entry_point_requires_command(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_reader_uses_default_file_name(tmp_path: Path, monkeypatch, capsys):
    (tmp_path / "people-to-read.txt").write_text("Luke Skywalker Jedi 19\n")
    monkeypatch.chdir(tmp_path)

    read_main([])

    assert "Read this line: Luke Skywalker Jedi 19" in capsys.readouterr().out


def test_log_file_option_records_internal_operations(
    luke_file: Path, tmp_path: Path, capsys
):
    log_file = tmp_path / "logs" / "run.log"

    try:
        read_main([str(luke_file), "--log-file", str(log_file)])
    finally:
        setup_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "Starting record file read" in content
    assert "Read this string: Luke" in capsys.readouterr().out
