"""Document loading service.

Keeps file I/O out of the parser, which only ever sees an in-memory string.
Designed to be testable offline by handing ``parse`` strings directly.
"""
from __future__ import annotations

import logging

from .errors import DocumentReadError

logger = logging.getLogger(__name__)


def read_document(path: str, encoding: str = "utf-8") -> str:
    """Read the whole document at ``path`` and return the decoded text.

    Line endings are left untouched; the parser normalizes them. Raises
    ``DocumentReadError`` on any I/O or decoding failure.
    """
    logger.info("Reading WebVTT document: %s", path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
        logger.debug("Read %d chars from %s", len(text), path)
        return text
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.error("Failed to read %s: %s", path, e)
        raise DocumentReadError(str(e))
