"""
File reader walking through each way of reading a person record file.
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from ..io.record_stream import RecordStream
from ..models.config import ReaderConfig
from ..models.person import Person
from ..utils.exceptions import StreamReadError
from ..utils.logging import LoggerMixin


@dataclass
class ReadReport:
    """What each reading pass produced."""

    token: Optional[str] = None
    number: Optional[int] = None
    line: Optional[str] = None
    char: Optional[str] = None
    chars: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)
    people: list[Person] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)


class PeopleFileReader(LoggerMixin):
    """
    Reads a person record file in six passes.

    Every pass starts from the beginning of the file:
    1. A token and then an integer
    2. A single line
    3. A single character
    4. Every character
    5. Every line
    6. Every person record
    """

    def __init__(self, out: Optional[TextIO] = None):
        """Initialise the reader with the stream narration is printed to."""
        self.out = out or sys.stdout

    def run(self, config: ReaderConfig) -> ReadReport:
        """
        Open the configured file and run every reading pass.

        Args:
            config: Reader configuration

        Returns:
            Report of the values each pass read

        Raises:
            FileOpenError: If the input file cannot be opened
        """
        self.log_operation("record file read", input_file=str(config.input_file))

        stream = RecordStream.open(
            config.input_file,
            encoding=config.encoding,
            fallback_encoding=config.fallback_encoding,
            detect=config.detect_encoding,
            max_detection_bytes=config.max_detection_bytes,
        )
        report = ReadReport()
        with stream:
            self.read_token_and_int(stream, report)
            self.read_single_line(stream, report)
            self.read_single_char(stream, report)
            self.scan_chars(stream, report)
            self.scan_lines(stream, report)
            self.scan_people(stream, report)

        self.log_success(
            "record file read",
            people=len(report.people),
            failures=len(report.failures),
        )
        return report

    def _print(self, *args, **kwargs) -> None:
        print(*args, file=self.out, **kwargs)

    def read_token_and_int(self, stream: RecordStream, report: ReadReport) -> None:
        """Read a string and then an int. The int read is expected to fail."""
        stream.reset()
        try:
            report.token = stream.read_token()
            self._print(f"Read this string: {report.token}")
        except StreamReadError as e:
            self._record_failure(report, "token", e)
            self._print("Failed to read a string.")

        try:
            report.number = stream.read_int()
            self._print(f"Read this int: {report.number}")
        except StreamReadError as e:
            self._record_failure(report, "int", e)
            self._print("Failed to read an int.")

    def read_single_line(self, stream: RecordStream, report: ReadReport) -> None:
        stream.reset()
        try:
            report.line = stream.read_line()
            self._print(f"Read this line: {report.line}")
        except StreamReadError as e:
            self._record_failure(report, "line", e)
            self._print("Failed to read a line.")

    def read_single_char(self, stream: RecordStream, report: ReadReport) -> None:
        stream.reset()
        try:
            report.char = stream.read_char()
            self._print(f"Read this char: {report.char}")
        except StreamReadError as e:
            self._record_failure(report, "char", e)
            self._print("Failed to read a char.")

    def scan_chars(self, stream: RecordStream, report: ReadReport) -> None:
        stream.reset()
        self._print("File contents, read a character at a time:", end="")
        for ch in stream.scan_chars():
            report.chars.append(ch)
            self._print(f' "{ch}"', end="")
        self._print("\n")

    def scan_lines(self, stream: RecordStream, report: ReadReport) -> None:
        stream.reset()
        self._print("File contents, read a line at a time:", end="")
        for line in stream.scan_lines():
            report.lines.append(line)
            self._print(f' "{line}"', end="")
        self._print("\n")

    def scan_people(self, stream: RecordStream, report: ReadReport) -> None:
        stream.reset()
        self._print("File contents, read a person at a time:")
        for person in stream.scan_people():
            report.people.append(person)
            self._print(person.describe())

    def _record_failure(
        self, report: ReadReport, step: str, error: StreamReadError
    ) -> None:
        report.failures.append(step)
        self.log_debug("Read failed", step=step, error=error)
