"""
Pure parsing building blocks for the WebVTT reader.

Every function here operates on an explicit ``Cursor`` owned by a single
parse call; nothing in this package performs I/O or keeps module state.
"""

__all__ = [
    "Cursor",
    "Mark",
    "Cue",
    "ParseResult",
    "normalize",
    "skip_header",
    "read_block",
    "read_timestamp",
    "parse_timestamp",
    "format_seconds",
]

from .cursor import Cursor, Mark
from .models import Cue, ParseResult
from .normalize import normalize
from .header import skip_header
from .blocks import read_block
from .timeutils import read_timestamp, parse_timestamp, format_seconds
