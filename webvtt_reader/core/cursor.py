"""Read position over an immutable, already normalized text buffer.

Offsets are code point indices into the ``str`` buffer, so multi-byte UTF-8
sequences are never split. The only backtrack the grammar needs is exposed as
the ``mark()`` / ``restore()`` pair.
"""
from __future__ import annotations

from typing import NamedTuple, Optional, Type

from webvtt_reader.errors import ExpectedLineTerminator, ParserError, UnexpectedEof

LF = "\u000A"
FF = "\u000C"
CR = "\u000D"
SPACE = " "
TAB = "\u0009"

WHITESPACE = (TAB, LF, FF, CR, SPACE)


class Mark(NamedTuple):
    position: int
    line: int


def describe(got: str) -> str:
    """Render offending input for error messages."""
    if got == "":
        return "end of input"
    return repr(got)


class Cursor:
    """Position and 1-based line counter over ``content``."""

    def __init__(self, content: str):
        self.content = content
        self.position = 0
        self.line = 1

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, line={self.line}, size={len(self.content)})"

    def peek(self, length: int = 1) -> str:
        return self.content[self.position:self.position + length]

    def advance(self, count: int = 1) -> None:
        self.position += count

    def at_end(self) -> bool:
        """True when the cursor is at, or one character before, the end."""
        return self.position + 1 >= len(self.content)

    def at_line_end(self) -> bool:
        return self.peek() == LF

    def mark(self) -> Mark:
        return Mark(self.position, self.line)

    def restore(self, mark: Mark) -> None:
        """Rewind to a position previously returned by ``mark()``."""
        self.position, self.line = mark

    def error(self, exc_type: Type[ParserError], message: str, got: Optional[str] = None) -> ParserError:
        """Build ``exc_type`` located at the current position."""
        if got is not None:
            message = f"{message}, got {describe(got)}"
        return exc_type(message, line=self.line, offset=self.position, got=got)

    def skip_whitespace(self) -> None:
        while self.peek() in WHITESPACE and not self.at_end():
            if self.peek() == LF:
                self.line += 1
            self.position += 1

    def skip_line_terminator(self) -> None:
        if self.peek() != LF:
            raise self.error(ExpectedLineTerminator, "Expected line terminator", got=self.peek())
        self.position += 1
        self.line += 1

    def read_line(self) -> str:
        """Return the text up to the next LF and consume the LF.

        Every line, the last one included, must be terminated.
        """
        start = self.position
        while self.peek() != LF and not self.at_end():
            self.position += 1
        line = self.content[start:self.position]

        if self.peek() != LF:
            raise self.error(UnexpectedEof, f"Unexpected end of file after {line!r}")
        self.position += 1
        self.line += 1
        return line
