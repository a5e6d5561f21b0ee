"""
File writer demonstrating truncate and append output.
"""

import sys
from typing import Optional, TextIO

from ..io.record_writer import RecordWriter, WriteMode
from ..models.config import WriterConfig
from ..models.person import Person
from ..utils.logging import LoggerMixin

DEFAULT_PERSON = Person.create("Darth", "Vader", "Imperial-Lord", 40)


class PeopleFileWriter(LoggerMixin):
    """Writes one record to an overwritten file and to an appended file."""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out or sys.stdout

    def run(self, config: WriterConfig, person: Optional[Person] = None) -> str:
        """
        Write the record to both configured destinations.

        The overwrite destination is written first; if it cannot be opened
        the append destination is never touched.

        Returns:
            The serialized record line

        Raises:
            FileOpenError: If either destination cannot be opened
            FileWriteError: If writing to a destination fails
        """
        person = person or DEFAULT_PERSON
        writer = RecordWriter(encoding=config.encoding)
        self.log_operation(
            "record file write",
            overwrite_file=str(config.overwrite_file),
            append_file=str(config.append_file),
        )

        writer.write_person(config.overwrite_file, person, WriteMode.TRUNCATE)
        print(f"Overwrote {config.overwrite_file} with: {person}", file=self.out)

        writer.write_person(config.append_file, person, WriteMode.APPEND)
        print(f"Appended to {config.append_file}: {person}", file=self.out)

        self.log_success("record file write", record=str(person))
        return person.to_line()
