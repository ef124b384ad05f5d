"""Enumeration, archiving and fan-out of directory entries."""

from dirzip.archive.archiver import Archiver, ZipCommandArchiver, archive_entry, archive_name_for
from dirzip.archive.enumerator import enumerate_entries
from dirzip.archive.fanout import FanOutDriver
from dirzip.archive.schemas import ArchiveSummary, EntryResult, EntryStatus

__all__ = [
    "Archiver",
    "ZipCommandArchiver",
    "archive_entry",
    "archive_name_for",
    "enumerate_entries",
    "FanOutDriver",
    "ArchiveSummary",
    "EntryResult",
    "EntryStatus",
]
