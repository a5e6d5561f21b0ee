"""
Person record model and its one-line text representation.
"""

from pydantic import BaseModel, Field, field_validator

FIELD_SEPARATOR = " "
LINE_TERMINATOR = "\n"


class Person(BaseModel):
    """A single person record: three text tokens and an integer age."""

    first_name: str = Field(..., description="First name, a single token")
    last_name: str = Field(..., description="Last name, a single token")
    job: str = Field(..., description="Job title, a single token")
    age: int = Field(..., strict=True, description="Age in years")

    @field_validator("first_name", "last_name", "job")
    @classmethod
    def validate_token(cls, v):
        """Text fields must survive a whitespace-delimited round trip."""
        if not v:
            raise ValueError("Field must not be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError(f"Field must not contain whitespace: {v!r}")
        return v

    @classmethod
    def create(cls, first_name: str, last_name: str, job: str, age: int) -> "Person":
        """Build a record from all four fields."""
        return cls(first_name=first_name, last_name=last_name, job=job, age=age)

    def to_line(self) -> str:
        """Serialize as ``first last job age`` followed by a newline."""
        fields = (self.first_name, self.last_name, self.job, str(self.age))
        return FIELD_SEPARATOR.join(fields) + LINE_TERMINATOR

    def describe(self) -> str:
        return f"Name: {self.first_name} {self.last_name}\tJob: {self.job}\tAge: {self.age}"

    def __str__(self) -> str:
        return self.to_line().rstrip(LINE_TERMINATOR)
