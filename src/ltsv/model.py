"""
Core LTSV Model Objects

Defines the value types produced by the tokenizer:
    - Separator constants (the fixed LTSV grammar)
    - Pair (one decoded label:value field)
    - ParseError family (why a field could not be decoded)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about how input is scanned
        - Are immutable
        - Compare by content, not by where they were found
"""

from dataclasses import dataclass, field as _field
from enum import Enum
from typing import Optional


NEWLINE = "\n"
TAB = "\t"
SPLITTER = ":"


@dataclass(frozen=True)
class Pair:
    """
    One decoded LTSV field.

    Properties:
        label:
            Text strictly before the first colon. Never contains a colon or tab.
            May be empty.

        field:
            Text after the first colon. May contain further colons, never a tab.
            May be empty.

        line, start, end:
            Where the field was found: 0-based record index and the span of the
            whole field segment relative to the start of its record.
            Not part of equality.

    Example:
        Pair("host", "127.0.0.1") renders as "host:127.0.0.1"
    """

    label: str
    field: str
    line: int = _field(default=0, compare=False)
    start: int = _field(default=0, compare=False)
    end: int = _field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.label}{SPLITTER}{self.field}"

    def to_string(self) -> str:
        """Render as ``label:field``."""
        return str(self)

    @classmethod
    def from_string(cls, text: str) -> "Pair":
        """
        Decode a single field segment.

        Args:
            text: One field, e.g. "status:200"

        Returns:
            Pair split on the first colon

        Raises:
            ValueError: If text holds more than one field (contains a tab)
            MissingDelimiter: If the segment has no colon
        """
        if TAB in text:
            raise ValueError(f"expected a single field, got a tab in {text!r}")
        label, sep, value = text.partition(SPLITTER)
        if not sep:
            raise MissingDelimiter(text)
        return cls(label=label, field=value, end=len(text))


class ErrorKind(Enum):
    """Why a field segment was rejected."""

    MISSING_DELIMITER = "missing_delimiter"
    INVALID_LABEL = "invalid_label"
    INVALID_FIELD = "invalid_field"


class ParseError(Exception):
    """
    Raised (or yielded, by the lazy tokenizers) when a field cannot be decoded.

    Properties:
        text: The offending part of the input
        kind: ErrorKind
        line: 0-based record index
        start, end: Span of `text` relative to the start of its record
    """

    kind: ErrorKind = ErrorKind.MISSING_DELIMITER
    reason = "field cannot be decoded"

    def __init__(self, text: str, line: int = 0, start: int = 0, end: Optional[int] = None):
        self.text = text
        self.line = line
        self.start = start
        self.end = start + len(text) if end is None else end
        super().__init__(
            f"{self.reason} at line {line}, columns {self.start}..{self.end}: {text!r}"
        )

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.kind, self.text, self.line, self.start, self.end) == (
            other.kind, other.text, other.line, other.start, other.end
        )

    def __hash__(self):
        return hash((self.kind, self.text, self.line, self.start, self.end))


class MissingDelimiter(ParseError):
    """Field segment contains no colon."""

    kind = ErrorKind.MISSING_DELIMITER
    reason = "missing ':' delimiter"


class InvalidLabel(ParseError):
    """Label is empty or uses characters outside [0-9A-Za-z_.-] (strict mode only)."""

    kind = ErrorKind.INVALID_LABEL
    reason = "invalid label"


class InvalidField(ParseError):
    """Field value contains NUL, CR or LF (strict mode only)."""

    kind = ErrorKind.INVALID_FIELD
    reason = "invalid field value"
