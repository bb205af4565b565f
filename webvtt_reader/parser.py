"""Parser facade: normalize, validate the header, read cue blocks."""
from __future__ import annotations

import logging
from typing import Union

from .core import Cursor, ParseResult, normalize, read_block, skip_header
from .errors import InvalidEncoding

logger = logging.getLogger(__name__)


def _decode(content: bytes) -> str:
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as e:
        got = "".join(f"\\x{b:02x}" for b in content[e.start:e.end])
        line = content.count(b"\n", 0, e.start) + 1
        raise InvalidEncoding(f"Invalid UTF-8 byte(s) {got}", line=line, offset=e.start, got=got) from e


def parse(content: Union[str, bytes], all_blocks: bool = False) -> ParseResult:
    """Parse a WebVTT document held in memory.

    ``bytes`` input is decoded as UTF-8.

    By default a single block is read, so the result holds at most one cue
    and every line after the first timing line is part of its text. With
    ``all_blocks=True`` the block reader runs until the end of input; a blank
    line after a timing line closes the block and further blank lines before
    the next block are skipped.

    Raises a ``webvtt_reader.errors.ParserError`` subclass on the first
    malformed construct.
    """
    if isinstance(content, bytes):
        content = _decode(content)

    cursor = Cursor(normalize(content))
    logger.debug("Parsing WebVTT document (%d chars)", len(cursor.content))

    skip_header(cursor)
    result = ParseResult()
    if cursor.at_end():
        logger.debug("Document has no cue blocks")
        return result

    if not all_blocks:
        result.cues.append(read_block(cursor))
    else:
        while not cursor.at_end():
            result.cues.append(read_block(cursor, stop_at_blank_line=True))
            while cursor.at_line_end() and not cursor.at_end():
                cursor.skip_line_terminator()

    logger.debug("Parsed %d cue(s), stopped at line %d", len(result.cues), cursor.line)
    return result
