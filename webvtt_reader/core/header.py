"""File header: optional BOM, ``WEBVTT`` signature, blank separator line."""
from __future__ import annotations

from webvtt_reader.errors import MissingSignature

from .cursor import LF, SPACE, TAB, Cursor

BOM = "\ufeff"
SIGNATURE = "WEBVTT"


def skip_bom(cursor: Cursor) -> None:
    if cursor.peek() == BOM:
        cursor.advance()


def skip_signature(cursor: Cursor) -> None:
    if cursor.peek(len(SIGNATURE)) != SIGNATURE:
        raise cursor.error(MissingSignature, f"Missing {SIGNATURE} at beginning of file",
                           got=cursor.peek(len(SIGNATURE)))
    cursor.advance(len(SIGNATURE))


def skip_signature_trails(cursor: Cursor) -> None:
    """Skip free-form text after ``WEBVTT`` when introduced by a space or tab."""
    if cursor.peek() in (SPACE, TAB):
        cursor.advance()
        while cursor.peek() != LF and not cursor.at_end():
            cursor.advance()


def skip_header(cursor: Cursor) -> None:
    skip_bom(cursor)
    skip_signature(cursor)
    skip_signature_trails(cursor)
    cursor.skip_line_terminator()
    # Metadata headers between the signature and the blank line are not supported.
    cursor.skip_line_terminator()
