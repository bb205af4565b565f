"""Exceptions raised while parsing a WebVTT document.

Every failure is fatal: the first error aborts the parse and propagates out of
``webvtt_reader.parse`` unchanged.
"""
from __future__ import annotations

from typing import Optional


class ParserError(Exception):
    """Base class for all parse failures.

    Carries the 1-based ``line`` and the code point ``offset`` at which the
    failure was detected, plus ``got`` (the offending character(s)) when the
    grammar expected something specific.
    """

    kind = "ParserError"

    def __init__(self, message: str, line: int, offset: int, got: Optional[str] = None):
        self.message = message
        self.line = line
        self.offset = offset
        self.got = got
        super().__init__(f"{message} at line {line}, pos {offset}")


class InvalidEncoding(ParserError):
    """Raised when ``bytes`` input is not valid UTF-8.

    ``offset`` is a byte offset into the undecoded input.
    """

    kind = "InvalidEncoding"


class MissingSignature(ParserError):
    """Raised when the document does not open with ``WEBVTT``."""

    kind = "MissingSignature"


class ExpectedLineTerminator(ParserError):
    """Raised when a required LF is absent."""

    kind = "ExpectedLineTerminator"


class UnexpectedEof(ParserError):
    """Raised when a line is not terminated before the end of input."""

    kind = "UnexpectedEof"


class ExpectedTimestamp(ParserError):
    kind = "ExpectedTimestamp"


class ExpectedColon(ParserError):
    kind = "ExpectedColon"


class ExpectedFullStop(ParserError):
    kind = "ExpectedFullStop"


class ExpectedArrow(ParserError):
    kind = "ExpectedArrow"


class ExpectedTwoDigitInteger(ParserError):
    kind = "ExpectedTwoDigitInteger"


class ExpectedThreeDigitInteger(ParserError):
    kind = "ExpectedThreeDigitInteger"


class MinutesOutOfRange(ParserError):
    kind = "MinutesOutOfRange"


class SecondsOutOfRange(ParserError):
    kind = "SecondsOutOfRange"
