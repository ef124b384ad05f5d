"""
Core configuration and error types shared across dirzip.
"""

from dirzip.core.config import Settings, load_settings
from dirzip.core.errors import DirzipError, InvalidInputError, InputError, ArchiveError

__all__ = [
    "Settings",
    "load_settings",
    "DirzipError",
    "InvalidInputError",
    "InputError",
    "ArchiveError",
]
