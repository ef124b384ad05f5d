"""
Shared fixtures for dirzip tests.
"""

import threading
from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple

import pytest

from dirzip.archive.archiver import Archiver
from dirzip.core.errors import ArchiveError


class RecordingArchiver(Archiver):
    """Archiver that records every call and writes a marker file instead of a ZIP."""

    def __init__(self, fail_for: Optional[Set[str]] = None):
        self.fail_for = fail_for or set()
        self.calls: List[Tuple[Path, List[Path], str]] = []
        self._lock = threading.Lock()

    def archive(self, output: Path, inputs: Sequence[Path], password: str) -> None:
        with self._lock:
            self.calls.append((Path(output), list(inputs), password))
        if any(Path(path).name in self.fail_for for path in inputs):
            raise ArchiveError("'zip' exited with status 12", return_code=12, detail="zip error: Nothing to do!")
        Path(output).write_text("\n".join(str(path) for path in inputs))

    @property
    def passwords(self) -> Set[str]:
        return {password for _, _, password in self.calls}

    @property
    def outputs(self) -> List[str]:
        return [output.name for output, _, _ in self.calls]


@pytest.fixture
def recording_archiver():
    return RecordingArchiver()


@pytest.fixture
def sample_root(tmp_path):
    """A root directory holding a file and a nested subdirectory."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_text("charlie")
    (root / "b" / "deeper").mkdir()
    (root / "b" / "deeper" / "d.txt").write_text("delta")
    return root


@pytest.fixture
def out_dir(tmp_path, monkeypatch):
    """An empty working directory the archives land in."""
    out = tmp_path / "out"
    out.mkdir()
    monkeypatch.chdir(out)
    monkeypatch.delenv("ZIP_PASSWORD", raising=False)
    monkeypatch.delenv("DIRZIP_KEYRING_SERVICE", raising=False)
    return out
