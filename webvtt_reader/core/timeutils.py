"""Timestamp micro-grammar and time display helpers.

``Timestamp := Digits ":" 2Digits [":" 2Digits] "." 3Digits``
"""
from __future__ import annotations

from typing import Tuple

from webvtt_reader.errors import (
    ExpectedColon,
    ExpectedFullStop,
    ExpectedLineTerminator,
    ExpectedThreeDigitInteger,
    ExpectedTimestamp,
    ExpectedTwoDigitInteger,
    MinutesOutOfRange,
    SecondsOutOfRange,
)

from .cursor import Cursor

_N_DIGIT_ERRORS = {
    2: ExpectedTwoDigitInteger,
    3: ExpectedThreeDigitInteger,
}


def is_ascii_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def _read_integer(cursor: Cursor) -> Tuple[str, int]:
    start = cursor.position
    while is_ascii_digit(cursor.peek()):
        cursor.advance()
    digits = cursor.content[start:cursor.position]
    return digits, int(digits) if digits else 0


def _read_n_digit_integer(cursor: Cursor, n: int) -> int:
    digits, value = _read_integer(cursor)
    if len(digits) != n:
        raise cursor.error(_N_DIGIT_ERRORS[n], f"Expected {n}-digit integer in Timestamp", got=digits or cursor.peek())
    return value


def _skip_separator(cursor: Cursor, char: str, exc_type, name: str) -> None:
    if cursor.peek() != char or cursor.at_end():
        raise cursor.error(exc_type, f"Expected {name} ({char}) in Timestamp", got=cursor.peek())
    cursor.advance()


def read_timestamp(cursor: Cursor) -> float:
    """Read one timestamp at the cursor and return it in seconds.

    The first component is hours when its value exceeds 59 or it is not
    written with exactly two digits (``"009"`` is hours); otherwise it is
    minutes unless a third component follows.
    """
    if not is_ascii_digit(cursor.peek()):
        raise cursor.error(ExpectedTimestamp, "Expected Timestamp", got=cursor.peek())

    digits, value1 = _read_integer(cursor)
    hour_qualified = value1 > 59 or len(digits) != 2

    _skip_separator(cursor, ":", ExpectedColon, "COLON")
    value2 = _read_n_digit_integer(cursor, 2)

    if hour_qualified or (not cursor.at_line_end() and cursor.peek() == ":"):
        _skip_separator(cursor, ":", ExpectedColon, "COLON")
        hours, minutes, seconds = value1, value2, _read_n_digit_integer(cursor, 2)
    else:
        hours, minutes, seconds = 0, value1, value2

    _skip_separator(cursor, ".", ExpectedFullStop, "FULL STOP")
    millis = _read_n_digit_integer(cursor, 3)

    if minutes > 59:
        raise cursor.error(MinutesOutOfRange, f"Error when parsing Timestamp: minutes {minutes} > 59")
    if seconds > 59:
        raise cursor.error(SecondsOutOfRange, f"Error when parsing Timestamp: seconds {seconds} > 59")

    return hours * 3600 + minutes * 60 + seconds + millis / 1000


def parse_timestamp(text: str) -> float:
    """Parse a standalone timestamp string such as ``"01:02.003"``.

    Surrounding whitespace is ignored; anything else after the timestamp
    raises ``ExpectedLineTerminator``.
    """
    # Trailing sentinel so the last digit is never "within one of the end".
    cursor = Cursor(text.strip() + "\n")
    value = read_timestamp(cursor)
    if not cursor.at_line_end():
        raise cursor.error(ExpectedLineTerminator, "Unexpected text after Timestamp", got=cursor.peek())
    return value


def format_seconds(seconds: float) -> str:
    """Format a duration in seconds as ``HH:MM:SS.mmm``.

    Keeps the sign for negative values, rounds milliseconds to 3 digits.
    """
    sign = '-' if seconds < 0 else ''
    total_ms = int(round(abs(seconds) * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"
