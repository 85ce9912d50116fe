"""
LTSV Tokenizer (Layer 1: Raw Text → lazy records → lazy pairs).

Two nested lazy sequences over one caller-owned string:

    tokenize(text)  →  Data      (one Record per newline-delimited line)
    Record          →  items     (one Pair or ParseError per tab-delimited field)

Nothing is scanned at construction time. Each step of either iterator does a
single bounded str.find from its cursor, so a caller that stops early never
touches the rest of the input.

Grammar:
    input   := record (NEWLINE record)*
    record  := field (TAB field)*        ; may be empty
    field   := label COLON value
    label   := no TAB, no COLON          ; may be empty
    value   := no TAB                    ; may be empty, may contain COLON

Errors are yielded as items, never raised, so a malformed field does not
prevent earlier (or later) fields from being consumed.
"""

import re
from typing import Iterator, List, Optional, Union

from ltsv.model import (
    NEWLINE,
    TAB,
    SPLITTER,
    Pair,
    ParseError,
    MissingDelimiter,
    InvalidLabel,
    InvalidField,
)


FieldResult = Union[Pair, ParseError]

_LABEL_RE = re.compile(r"[0-9A-Za-z_.\-]*")
_INVALID_FIELD_CHARS = ("\x00", "\r", "\n")


def validate_pair(pair: Pair) -> Optional[ParseError]:
    """
    Strict check of a decoded pair.

    Labels may only use [0-9A-Za-z_.-] (empty is allowed); values must not contain
    NUL, CR or LF.

    Args:
        pair: Pair with its position filled in by the tokenizer

    Returns:
        InvalidLabel / InvalidField describing the first problem, or None
    """
    label_end = pair.start + len(pair.label)
    if not _LABEL_RE.fullmatch(pair.label):
        return InvalidLabel(pair.label, line=pair.line, start=pair.start, end=label_end)
    if any(ch in pair.field for ch in _INVALID_FIELD_CHARS):
        return InvalidField(pair.field, line=pair.line, start=label_end + 1, end=pair.end)
    return None


class Record:
    """
    Field tokenizer for one record.

    Holds a reference to the whole input plus the [start, end) bounds of this
    record and a cursor. Single-pass: once exhausted it stays exhausted, but a
    fresh Record over the same bounds costs nothing.

    Properties:
        line: 0-based index of this record in the input
    """

    def __init__(self, source: str, start: int, end: int, line: int = 0, strict: bool = False):
        self._source = source
        self._start = start
        self._end = end
        self._pos = start
        # an empty record has zero fields, not one empty field
        self._done = start == end
        self.line = line
        self.strict = strict

    @property
    def text(self) -> str:
        """Raw text of the record (newline excluded)."""
        return self._source[self._start:self._end]

    def __iter__(self) -> Iterator[FieldResult]:
        return self

    def __next__(self) -> FieldResult:
        if self._done:
            raise StopIteration

        seg_start = self._pos
        tab = self._source.find(TAB, seg_start, self._end)
        if tab == -1:
            seg_end = self._end
            self._done = True
        else:
            seg_end = tab
            self._pos = tab + 1

        return self._decode(seg_start, seg_end)

    def _decode(self, seg_start: int, seg_end: int) -> FieldResult:
        """Split one field segment on its first colon."""
        col_start = seg_start - self._start
        col_end = seg_end - self._start

        colon = self._source.find(SPLITTER, seg_start, seg_end)
        if colon == -1:
            return MissingDelimiter(
                self._source[seg_start:seg_end],
                line=self.line,
                start=col_start,
                end=col_end,
            )

        pair = Pair(
            label=self._source[seg_start:colon],
            field=self._source[colon + 1:seg_end],
            line=self.line,
            start=col_start,
            end=col_end,
        )
        if self.strict:
            error = validate_pair(pair)
            if error is not None:
                return error
        return pair

    def pairs(self) -> Iterator[Pair]:
        """Yield the remaining pairs, skipping fields that failed to decode."""
        for item in self:
            if isinstance(item, Pair):
                yield item

    def collect(self) -> List[Pair]:
        """
        Drain the remaining fields.

        Raises:
            ParseError: The first field that failed to decode
        """
        out = []
        for item in self:
            if isinstance(item, ParseError):
                raise item
            out.append(item)
        return out

    def __repr__(self) -> str:
        return f"Record(line={self.line}, text={self.text!r})"


class Data:
    """
    Record tokenizer over the whole input.

    Yields one Record per newline-delimited line, in input order. A trailing
    newline does not produce an extra empty record; empty input produces none.

    Properties:
        current_line: index of the next record to be produced
    """

    def __init__(self, source: str, strict: bool = False):
        self._source = source
        self._pos = 0
        self.current_line = 0
        self.strict = strict

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        if self._pos >= len(self._source):
            raise StopIteration

        start = self._pos
        newline = self._source.find(NEWLINE, start)
        if newline == -1:
            end = len(self._source)
            self._pos = end
        else:
            end = newline
            self._pos = newline + 1
            # strict mode takes CRLF as the line ending
            if self.strict and end > start and self._source[end - 1] == "\r":
                end -= 1

        record = Record(self._source, start, end, line=self.current_line, strict=self.strict)
        self.current_line += 1
        return record

    def run(self) -> List[List[Pair]]:
        """
        Drive the remaining records to completion.

        Returns:
            One list of pairs per record

        Raises:
            ParseError: The first field that failed to decode; nothing partial is returned
        """
        return [record.collect() for record in self]


def tokenize(text: str, strict: bool = False) -> Data:
    """
    Start tokenizing LTSV text.

    Does no scanning: errors only surface while iterating into the field
    that caused them.

    Args:
        text: The whole input; must stay alive while the tokenizer is used
        strict: Also reject labels outside [0-9A-Za-z_.-] and values with NUL/CR/LF

    Returns:
        Data iterator of Record iterators

    Raises:
        TypeError: If text is not a str
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize() expects str, got {type(text).__name__}")
    return Data(text, strict=strict)


__all__ = [
    "tokenize",
    "validate_pair",
    "Data",
    "Record",
    "FieldResult",
]
