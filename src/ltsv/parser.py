"""
LTSV Parser (Layer 2: lazy tokens → owned lists of Pair).

Eager convenience layer over `ltsv.tokenizer`. This is the only part of the
package that builds per-record and per-field storage.

Contract:
    - Records and fields keep input order exactly
    - By default all-or-nothing: the first bad field (record, then field order)
      is raised and partial output is discarded
    - With skip_invalid=True bad fields are dropped with a UserWarning
"""

import warnings
from typing import List

from ltsv.model import NEWLINE, Pair, ParseError
from ltsv.tokenizer import tokenize, validate_pair


def parse(text: str, strict: bool = False, skip_invalid: bool = False) -> List[List[Pair]]:
    """
    Parse LTSV text into records of pairs.

    Args:
        text: LTSV input
        strict: Validate label and value characters as well as the colon
        skip_invalid: Drop malformed fields (with a warning) instead of failing

    Returns:
        One list of Pair per record

    Raises:
        ParseError: First malformed field, unless skip_invalid is set
    """
    data = tokenize(text, strict=strict)
    if not skip_invalid:
        return data.run()

    records = []
    for record in data:
        pairs = []
        for item in record:
            if isinstance(item, ParseError):
                warnings.warn(f"Skipping field: {item}", UserWarning)
                continue
            pairs.append(item)
        records.append(pairs)
    return records


def parse_line(line: str, strict: bool = False) -> List[Pair]:
    """
    Parse a single record.

    Args:
        line: One LTSV record, without newline
        strict: Validate label and value characters

    Returns:
        The record's pairs (empty for an empty line)

    Raises:
        ValueError: If line contains a newline
        ParseError: First malformed field
    """
    if NEWLINE in line:
        raise ValueError("parse_line() expects a single record; use parse() for multi-line input")
    records = parse(line, strict=strict)
    return records[0] if records else []


__all__ = [
    "parse",
    "parse_line",
    "validate_pair",
]
