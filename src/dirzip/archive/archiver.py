"""
Archive creation for single directory entries.

The actual compression and encryption are done by an Archiver. The default
ZipCommandArchiver shells out to the `zip` binary; tests substitute their own
implementation.
"""

import os
import shutil
import logging
import tempfile
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence, Union

from dirzip.archive.schemas import EntryResult, EntryStatus
from dirzip.core.errors import ArchiveError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".zip"


def as_argument(path: Union[str, Path]) -> str:
    """Render a path so zip never mistakes it for an option."""
    text = str(path)
    if text.startswith("-"):
        return os.path.join(".", text)
    return text


class Archiver(ABC):
    """Capability that writes one password-protected archive."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def archive(self, output: Path, inputs: Sequence[Path], password: str) -> None:
        """
        Create output from inputs, recursing into directories.

        Raises:
            ArchiveError: If the archive could not be created
        """


class ZipCommandArchiver(Archiver):
    """Archiver backed by the external `zip` command."""

    def __init__(self, binary: str = "zip"):
        self.binary = binary

    def build_command(self, output: Path, inputs: Sequence[Path], password: str) -> list:
        # Argument vector, no shell: the password reaches zip untouched
        return [self.binary, "-r", "-P", password, as_argument(output)] + [as_argument(path) for path in inputs]

    def archive(self, output: Path, inputs: Sequence[Path], password: str) -> None:
        output = Path(output)
        # zip adds to an existing archive, so build in a scratch dir and swap it in
        try:
            work_dir = tempfile.mkdtemp(prefix=".dirzip-", dir=output.parent)
        except OSError as e:
            raise ArchiveError(f"Cannot write to {output.parent}: {e}", detail=str(e)) from e

        staged = Path(work_dir) / output.name
        try:
            command = self.build_command(staged, inputs, password)
            try:
                result = subprocess.run(command, capture_output=True, text=True)
            except (OSError, ValueError) as e:
                # ValueError: arguments zip can never receive, such as a NUL byte
                raise ArchiveError(f"Could not run '{self.binary}': {e}", detail=str(e)) from e

            if result.stdout:
                logger.debug(f"{self.binary} output for {output.name}:\n{result.stdout.rstrip()}")

            if result.returncode != 0:
                detail = (result.stderr or result.stdout or "").strip()
                raise ArchiveError(
                    f"'{self.binary}' exited with status {result.returncode}",
                    return_code=result.returncode,
                    detail=detail or None,
                )

            try:
                os.replace(staged, output)
            except OSError as e:
                raise ArchiveError(f"Could not move archive into place at {output}: {e}", detail=str(e)) from e
        finally:
            shutil.rmtree(work_dir, ignore_errors=True)


def archive_name_for(entry: Union[str, Path]) -> Optional[str]:
    """
    Name of the archive for an entry: its stem plus `.zip`.

    Returns None when the entry has no stem that can be written as UTF-8.
    """
    stem = Path(entry).stem
    if not stem:
        return None
    try:
        stem.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return f"{stem}{ARCHIVE_SUFFIX}"


def archive_entry(
    archiver: Archiver,
    entry: Path,
    password: str,
    output_dir: Union[str, Path] = ".",
) -> EntryResult:
    """
    Archive one entry into `<output_dir>/<stem>.zip`.

    Failures are reported in the returned result and never raised, so one bad
    entry cannot stop its siblings.
    """
    name = archive_name_for(entry)
    if name is None:
        logger.debug(f"Skipping {entry}: no usable file stem")
        return EntryResult(entry=entry, status=EntryStatus.SKIPPED, error="no usable file stem")

    output = Path(output_dir) / name
    logger.debug(f"Archiving {entry} -> {output} with {archiver.name}")
    try:
        archiver.archive(output, [entry], password)
    except ArchiveError as e:
        error = f"{e}: {e.detail}" if e.detail and e.detail not in str(e) else str(e)
        logger.debug(f"Archiving {entry} failed: {error}")
        return EntryResult(
            entry=entry,
            archive=output,
            status=EntryStatus.FAILED,
            return_code=e.return_code,
            error=error,
        )

    return EntryResult(entry=entry, archive=output, status=EntryStatus.SUCCEEDED, return_code=0)
