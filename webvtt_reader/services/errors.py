"""Custom exceptions for service layer operations."""


class DocumentReadError(Exception):
    """Raised when reading a caption document from disk fails."""
