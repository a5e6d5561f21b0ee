"""
Sequential record stream with an explicit cursor and failure latch.
"""

import io
from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO

from ..models.person import Person
from ..utils.exceptions import (
    EndOfStreamError,
    FileOpenError,
    StreamReadError,
    handle_record_error,
)
from ..utils.logging import LoggerMixin
from .encoding import detect_encoding

DIGITS = frozenset("0123456789")
SIGNS = frozenset("+-")


class StreamState(str, Enum):
    """Read state of an open stream."""

    READY = "ready"
    END_REACHED = "end_reached"
    FAILED = "failed"


class RecordStream(LoggerMixin):
    """
    Reads tokens, integers, lines, characters and person records from text.

    Every read either returns a value or raises StreamReadError and latches
    the stream into FAILED. A read that produced a value but touched
    end-of-file leaves the stream in END_REACHED. In both non-ready states
    further reads fail immediately until clear() or reset() is called.
    """

    def __init__(self, handle: TextIO, name: str = "<stream>"):
        """Wrap an already open text handle. The stream takes ownership of it."""
        self._handle = handle
        self.name = name
        self._state = StreamState.READY
        self._eof = False
        self._lookahead: Optional[str] = None
        self._closed = False

    @classmethod
    def open(
        cls,
        file_path: Path,
        encoding: Optional[str] = None,
        fallback_encoding: str = "utf-8",
        detect: bool = True,
        max_detection_bytes: int = 10000,
    ) -> "RecordStream":
        """Open a record file for reading.

        Raises:
            FileOpenError: If the file cannot be opened
        """
        if encoding is None:
            encoding = (
                detect_encoding(file_path, fallback_encoding, max_detection_bytes)
                if detect
                else fallback_encoding
            )

        try:
            handle = file_path.open("r", encoding=encoding)
        except LookupError as e:
            raise FileOpenError(
                f"Unknown encoding {encoding!r}", path=str(file_path), mode="r"
            ) from e
        except OSError as e:
            raise handle_record_error(e, {"path": str(file_path), "mode": "r"}) from e

        stream = cls(handle, name=str(file_path))
        stream.log_debug("Opened record file", file_path=file_path, encoding=encoding)
        return stream

    @classmethod
    def from_string(cls, text: str, name: str = "<string>") -> "RecordStream":
        """Create a stream over in-memory text."""
        return cls(io.StringIO(text), name=name)

    def __enter__(self) -> "RecordStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying handle. Safe to call more than once."""
        if not self._closed:
            self._handle.close()
            self._closed = True
            self.log_debug("Closed record file", file_path=self.name)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def eof(self) -> bool:
        """True once a read has touched end-of-file."""
        return self._eof

    @property
    def fail(self) -> bool:
        return self._state is StreamState.FAILED

    def clear(self) -> None:
        """Return to READY from FAILED or END_REACHED."""
        self._state = StreamState.READY
        self._eof = False

    def seek(self, offset: int = 0) -> None:
        """Move the cursor. Does not clear a latched state."""
        if self._closed:
            raise StreamReadError(
                "Stream is closed", operation="seek", file_path=self.name
            )
        self._handle.seek(offset)
        self._lookahead = None

    def reset(self) -> None:
        """Clear the latch and rewind to the start of the file."""
        self.clear()
        self.seek(0)

    # Low level character access

    def _peek(self, operation: str) -> str:
        if self._lookahead is None:
            try:
                self._lookahead = self._handle.read(1)
            except UnicodeDecodeError as e:
                self._state = StreamState.FAILED
                raise handle_record_error(
                    e, {"operation": operation, "path": self.name}
                ) from e
        if self._lookahead == "":
            self._eof = True
        return self._lookahead

    def _advance(self) -> None:
        self._lookahead = None

    def _skip_whitespace(self, operation: str) -> None:
        while True:
            ch = self._peek(operation)
            if ch == "" or not ch.isspace():
                return
            self._advance()

    def _sentry(self, operation: str) -> None:
        if self._closed:
            self._state = StreamState.FAILED
            raise StreamReadError(
                "Stream is closed", operation=operation, file_path=self.name
            )
        if self._state is not StreamState.READY:
            self._fail(operation, f"stream is {self._state.value}")

    def _fail(self, operation: str, reason: str) -> None:
        self._state = StreamState.FAILED
        error_cls = EndOfStreamError if self._eof else StreamReadError
        raise error_cls(
            f"Failed to {operation}: {reason}", operation=operation, file_path=self.name
        )

    def _finish(self) -> None:
        if self._eof:
            self._state = StreamState.END_REACHED

    # Single reads

    def read_token(self) -> str:
        """Read the next whitespace-delimited token."""
        operation = "read a string"
        self._sentry(operation)
        self._skip_whitespace(operation)
        if self._peek(operation) == "":
            self._fail(operation, "end of file")

        chars = []
        while True:
            ch = self._peek(operation)
            if ch == "" or ch.isspace():
                break
            chars.append(ch)
            self._advance()
        self._finish()
        return "".join(chars)

    def read_int(self) -> int:
        """Read an optionally signed base-10 integer.

        Reading stops at the first character that is not a digit, which is
        left unconsumed.
        """
        operation = "read an int"
        self._sentry(operation)
        self._skip_whitespace(operation)

        chars = []
        if self._peek(operation) in SIGNS:
            chars.append(self._peek(operation))
            self._advance()

        digits = 0
        while True:
            ch = self._peek(operation)
            if ch == "" or ch not in DIGITS:
                break
            chars.append(ch)
            digits += 1
            self._advance()

        if digits == 0:
            found = self._peek(operation)
            self._fail(
                operation, "end of file" if found == "" else f"unexpected {found!r}"
            )
        self._finish()
        return int("".join(chars))

    def read_line(self) -> str:
        """Read up to the next newline. The newline is consumed, not returned."""
        operation = "read a line"
        self._sentry(operation)

        chars = []
        while True:
            ch = self._peek(operation)
            if ch == "":
                if not chars:
                    self._fail(operation, "end of file")
                break
            self._advance()
            if ch == "\n":
                break
            chars.append(ch)
        self._finish()
        return "".join(chars)

    def read_char(self) -> str:
        """Read exactly one character."""
        operation = "read a char"
        self._sentry(operation)
        ch = self._peek(operation)
        if ch == "":
            self._fail(operation, "end of file")
        self._advance()
        return ch

    def read_person(self) -> Person:
        """Read four fields as one record. Partially read fields are discarded."""
        first_name = self.read_token()
        last_name = self.read_token()
        job = self.read_token()
        age = self.read_int()
        return Person.create(first_name, last_name, job, age)

    # Repeated scans. Each attempts a read and stops at the first failure,
    # so the read that lands on end-of-file never yields an empty entry.

    def scan_chars(self) -> Iterator[str]:
        yield from self._scan(self.read_char, "character scan")

    def scan_lines(self) -> Iterator[str]:
        yield from self._scan(self.read_line, "line scan")

    def scan_people(self) -> Iterator[Person]:
        yield from self._scan(self.read_person, "person scan")

    def _scan(self, read, operation: str) -> Iterator:
        count = 0
        while not self.eof:
            try:
                item = read()
            except StreamReadError as e:
                self.log_debug(f"{operation} stopped", reason=e.message)
                break
            count += 1
            yield item
        self.log_debug(f"Finished {operation}", file_path=self.name, items=count)
