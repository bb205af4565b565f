"""Service layer modules (file I/O around the pure parser).

Currently includes document loading helpers.
"""

__all__ = [
    "source",
    "errors",
]
