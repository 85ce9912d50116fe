"""
LTSV (Labeled Tab-Separated Values) Package

Lazy tokenizer and eager parser for LTSV text:

    host:127.0.0.1<TAB>status:200<NEWLINE>
    host:10.0.0.2<TAB>status:404<NEWLINE>

LAYERING:
---------
    ltsv.model          Pair, separator constants, ParseError family
    ltsv.tokenizer      tokenize(): lazy records of lazy fields, errors as items
    ltsv.parser         parse(): eager, fails on the first malformed field
    ltsv.serialization  back to LTSV text, JSON, YAML

Values are always returned as raw text. Typed interpretation is up to the caller.
"""

from ltsv.model import (
    NEWLINE,
    TAB,
    SPLITTER,
    Pair,
    ErrorKind,
    ParseError,
    MissingDelimiter,
    InvalidLabel,
    InvalidField,
)
from ltsv.tokenizer import tokenize, validate_pair, Data, Record
from ltsv.parser import parse, parse_line

__version__ = "0.1.0"

__all__ = [
    "tokenize",
    "parse",
    "parse_line",
    "validate_pair",
    "Data",
    "Record",
    "Pair",
    "ErrorKind",
    "ParseError",
    "MissingDelimiter",
    "InvalidLabel",
    "InvalidField",
    "NEWLINE",
    "TAB",
    "SPLITTER",
]
