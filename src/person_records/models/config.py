"""
Configuration models for the person record reader and writer.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_INPUT_FILE = Path("people-to-read.txt")
DEFAULT_OVERWRITE_FILE = Path("people-to-overwrite.txt")
DEFAULT_APPEND_FILE = Path("people-to-append-to.txt")


class ReaderConfig(BaseModel):
    """Configuration for the file reader."""

    input_file: Path = Field(
        default=DEFAULT_INPUT_FILE, description="Record file to read"
    )
    encoding: Optional[str] = Field(
        default=None, description="Input encoding; skips detection when set"
    )
    fallback_encoding: str = Field(
        default="utf-8", description="Encoding used when detection is inconclusive"
    )
    detect_encoding: bool = Field(
        default=True, description="Detect the input encoding with chardet"
    )
    max_detection_bytes: int = Field(
        default=10000, ge=1, description="Bytes sampled for encoding detection"
    )

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string paths to Path objects."""
        return Path(v) if not isinstance(v, Path) else v

    @classmethod
    def from_cli_args(cls, args: dict[str, Any]) -> "ReaderConfig":
        """Create configuration from CLI arguments."""
        config = cls()
        if args.get("input_file"):
            config.input_file = Path(args["input_file"])
        if args.get("encoding"):
            config.encoding = args["encoding"]
        return config


class WriterConfig(BaseModel):
    """Configuration for the file writer."""

    overwrite_file: Path = Field(
        default=DEFAULT_OVERWRITE_FILE, description="Destination opened in truncate mode"
    )
    append_file: Path = Field(
        default=DEFAULT_APPEND_FILE, description="Destination opened in append mode"
    )
    encoding: str = Field(default="utf-8", description="Output encoding")

    @field_validator("overwrite_file", "append_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string paths to Path objects."""
        return Path(v) if not isinstance(v, Path) else v

    @classmethod
    def from_cli_args(cls, args: dict[str, Any]) -> "WriterConfig":
        """Create configuration from CLI arguments."""
        config = cls()
        if args.get("overwrite_file"):
            config.overwrite_file = Path(args["overwrite_file"])
        if args.get("append_file"):
            config.append_file = Path(args["append_file"])
        return config
