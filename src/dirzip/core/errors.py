"""
Exceptions raised by dirzip.

InvalidInputError and InputError are fatal and stop the run before any
archive is written. ArchiveError only ever concerns a single entry.
"""

from typing import Optional


class DirzipError(Exception):
    """Base class for dirzip errors."""
    pass


class InvalidInputError(DirzipError):
    """Raised when the root path is missing or is not a directory."""
    pass


class InputError(DirzipError):
    """Raised when the password cannot be read interactively."""
    pass


class ArchiveError(DirzipError):
    """Raised when the archiving tool fails for one entry."""

    def __init__(self, message: str, return_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.return_code = return_code
        self.detail = detail
