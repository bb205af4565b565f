"""Cue block reader.

A block is an optional identifier line, the timing line, and the text lines
that follow, up to the next block's timing line or the end of input. The
timing line must be one of the first two lines of its block; an arrow found
later, before any arrow in the current block, starts the next block.
"""
from __future__ import annotations

import logging
from typing import Optional

from webvtt_reader.errors import ExpectedArrow

from .cursor import Cursor
from .models import Cue
from .timeutils import read_timestamp

logger = logging.getLogger(__name__)

ARROW = "-->"


def skip_arrow(cursor: Cursor) -> None:
    if cursor.peek(len(ARROW)) != ARROW:
        raise cursor.error(ExpectedArrow, f'Expected "{ARROW}" between Timestamps', got=cursor.peek())
    cursor.advance(len(ARROW))


def read_block(cursor: Cursor, stop_at_blank_line: bool = False) -> Cue:
    """Read one block starting at the cursor and return its cue.

    ``start``/``end`` stay ``None`` when the block ends before a timing line
    was seen. Once the timing line is parsed, whatever follows the end
    timestamp on that line is read back as an ordinary line.

    With ``stop_at_blank_line`` an empty line after the timing line also
    ends the block; the empty line is consumed.
    """
    block_line_no = 0
    seen_arrow = False
    timing_tail = False
    buffer = ""
    start: Optional[float] = None
    end: Optional[float] = None

    while True:
        mark = cursor.mark()
        line = cursor.read_line()
        block_line_no += 1

        if ARROW in line and not seen_arrow:
            # Either way the line is scanned again from its first character.
            cursor.restore(mark)
            if block_line_no > 2:
                logger.debug("Block boundary at line %d", cursor.line)
                break
            seen_arrow = True
            timing_tail = True

            cursor.skip_whitespace()
            start = read_timestamp(cursor)
            cursor.skip_whitespace()
            skip_arrow(cursor)
            cursor.skip_whitespace()
            end = read_timestamp(cursor)
        elif stop_at_blank_line and seen_arrow and not timing_tail and line == "":
            break
        else:
            buffer += line
            timing_tail = False

        if cursor.at_end():
            break

    return Cue(start=start, end=end, text=buffer)
