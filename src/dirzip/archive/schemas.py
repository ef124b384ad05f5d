"""
Schemas for archive run results.

Each entry produces one EntryResult; the fan-out driver collects them into an
ArchiveSummary once every entry has been processed.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class EntryStatus(str, Enum):
    """Outcome of archiving a single entry."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"     # No usable stem to name the archive after


class EntryResult(BaseModel):
    """Result of archiving one directory entry."""
    entry: Path
    archive: Optional[Path] = None
    status: EntryStatus
    return_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == EntryStatus.SUCCEEDED


class ArchiveSummary(BaseModel):
    """Aggregated outcome of a whole run, in enumeration order."""
    results: List[EntryResult] = Field(default_factory=list)

    def _count(self, status: EntryStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def succeeded(self) -> int:
        return self._count(EntryStatus.SUCCEEDED)

    @property
    def failed(self) -> int:
        return self._count(EntryStatus.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(EntryStatus.SKIPPED)

    @property
    def failed_entries(self) -> List[Path]:
        return [result.entry for result in self.results if result.status == EntryStatus.FAILED]

    def describe(self) -> str:
        return f"{self.succeeded} archived, {self.failed} failed, {self.skipped} skipped"
