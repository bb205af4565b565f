"""Strict reader for WebVTT caption documents."""

__all__ = [
    "parse",
    "Cue",
    "ParseResult",
    "ParserError",
]

from .core import Cue, ParseResult
from .errors import ParserError
from .parser import parse
