"""
Record writer with truncate and append semantics.
"""

import os
from enum import Enum
from pathlib import Path

from ..models.person import Person
from ..utils.exceptions import FileOpenError, FileWriteError, handle_record_error
from ..utils.logging import LoggerMixin


class WriteMode(str, Enum):
    """How a destination file is opened."""

    TRUNCATE = "w"
    APPEND = "a"


class RecordWriter(LoggerMixin):
    """Writes person records to text files, one record per line."""

    def __init__(self, encoding: str = "utf-8"):
        """Initialise record writer with the output encoding."""
        self.encoding = encoding

    def write_person(
        self,
        output_path: Path,
        person: Person,
        mode: WriteMode = WriteMode.TRUNCATE,
    ) -> int:
        """
        Write one serialized record to a destination file.

        The handle is flushed to disk and closed before returning, on every
        path.

        Args:
            output_path: Destination file
            person: Record to serialize
            mode: TRUNCATE discards existing content, APPEND preserves it

        Returns:
            Number of bytes written

        Raises:
            FileOpenError: If the destination cannot be opened or the
                encoding is unknown
            FileWriteError: If the record cannot be encoded, or writing or
                flushing fails
        """
        line = person.to_line()
        mode_name = mode.name.lower()

        # A record that cannot be encoded leaves the destination untouched
        try:
            data_size = len(line.encode(self.encoding))
        except LookupError as e:
            raise FileOpenError(
                f"Unknown encoding {self.encoding!r}",
                path=str(output_path),
                mode=mode_name,
            ) from e
        except UnicodeError as e:
            raise FileWriteError(
                f"Cannot encode record for {output_path}: {str(e)}",
                file_path=str(output_path),
            ) from e

        try:
            handle = output_path.open(mode.value, encoding=self.encoding, newline="")
        except OSError as e:
            raise handle_record_error(
                e, {"path": str(output_path), "mode": mode_name}
            ) from e

        try:
            with handle:
                handle.write(line)
                handle.flush()
                os.fsync(handle.fileno())
        except (OSError, UnicodeError) as e:
            raise FileWriteError(
                f"Error writing {output_path}: {str(e)}", file_path=str(output_path)
            ) from e

        self.log_info(
            "Record written",
            output_path=str(output_path),
            mode=mode_name,
            bytes=data_size,
        )
        return data_size
