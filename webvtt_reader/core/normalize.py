"""Input normalization applied once before any parsing."""
from __future__ import annotations

from .cursor import CR, LF

NULL = "\u0000"
REPLACEMENT = "\uFFFD"


def normalize(text: str) -> str:
    """Replace NUL with U+FFFD and canonicalize CRLF / lone CR to LF."""
    text = text.replace(NULL, REPLACEMENT)
    text = text.replace(CR + LF, LF)
    return text.replace(CR, LF)
