# explicit_tsp/errors.py
from __future__ import annotations
from typing import Optional


class ParseError(ValueError):
    """
    Base class for every failure while loading an instance.
    The message is meant for humans; callers only need to catch ParseError.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.line: Optional[str] = None
        self.line_number: Optional[int] = None

    def attach(self, line: Optional[str], line_number: Optional[int]) -> None:
        # keep the innermost context if already attached
        if self.line is None:
            self.line = line
            self.line_number = line_number

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        where = f"line {self.line_number}" if self.line_number else "last entry"
        return f'{self.message} ({where}: "{self.line}")'


class StreamError(ParseError):
    """Input could not be opened or read."""


class StructureError(ParseError):
    """A line has no recognizable key, or appears in the wrong section."""


class ValidationError(ParseError):
    """A known key carries a value that is not allowed, or the key itself is unknown."""


class CompletenessError(ParseError):
    """Something mandatory is missing (a field, the EOF marker, the distance matrix)."""


class DataError(ParseError):
    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.col = col


class EntryKindError(TypeError):
    """Stored entry value has a different kind than the one requested."""
