"""Errors raised while turning raw text into entries."""

from __future__ import annotations

from daybook.core.exceptions import DataProcessingError


class EntryImportError(DataProcessingError):
    """A line of input could not be turned into a raw entry.

    Attributes:
        line: The offending line, whitespace-stripped.
        line_number: 1-based position in the source, if known.
    """

    def __init__(self, message: str, *, line: str = "", line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedLineError(EntryImportError):
    """Raised when a line does not split into exactly a date and a title."""


class MalformedDateError(EntryImportError, ValueError):
    """Raised when the date field is not a valid YYYY-MM-DD calendar date."""
