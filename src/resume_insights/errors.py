"""Error taxonomy for the analyze and generate operations.

Every error carries a ``message`` that is safe to show to the end user.
"""

from __future__ import annotations

from dataclasses import dataclass

UNSUPPORTED_FORMAT_MESSAGE = "Unsupported file type provided. Please use PDF, DOCX, TXT, or MD."


class ResumeInsightsError(Exception):
    """Base class for all errors raised by resume_insights."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ValidationError(ResumeInsightsError):
    """Input failed structural or policy constraints. No external call was made."""

    def __init__(self, field_errors: list[FieldError]):
        self.field_errors = list(field_errors)
        summary = ", ".join(e.message for e in self.field_errors) or "unknown constraint"
        super().__init__(f"Invalid input: {summary}")

    def for_field(self, name: str) -> list[str]:
        return [e.message for e in self.field_errors if e.field == name]


class GenerationError(ResumeInsightsError):
    """The AI provider returned no usable output."""


class UnsupportedFormatError(GenerationError):
    """The resume document uses an encoding the provider cannot read."""

    def __init__(self, mime_type: str | None = None, message: str = UNSUPPORTED_FORMAT_MESSAGE):
        super().__init__(message)
        self.mime_type = mime_type


class PersistenceError(ResumeInsightsError):
    """A document store write failed."""


class UnknownError(ResumeInsightsError):
    """Anything not classified above; the message hides internal details."""
