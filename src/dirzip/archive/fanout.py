"""
Concurrent fan-out of archive invocations over directory entries.

Every archive name gets its own task on a thread pool. Workers only wait on
their own `zip` process, so a slow or hung entry never blocks the others.
"""

import os
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from dirzip.archive.archiver import Archiver, archive_entry, archive_name_for
from dirzip.archive.schemas import ArchiveSummary, EntryResult

logger = logging.getLogger(__name__)

ResultCallback = Callable[[EntryResult], None]


class FanOutDriver:
    """
    Runs the archive invoker for every entry on a worker pool.

    Entries whose archives would share a name are processed one after another
    in the order given, so the last of them ends up in the archive. All other
    entries run independently. The driver always waits for every entry and
    never stops early on failure.
    """

    def __init__(
        self,
        archiver: Archiver,
        output_dir: Union[str, Path] = ".",
        max_workers: Optional[int] = None,
        on_result: Optional[ResultCallback] = None,
    ):
        """
        Args:
            archiver: Archiver used for every entry
            output_dir: Directory the archives are written to
            max_workers: Pool size, defaults to the number of CPUs
            on_result: Called with each EntryResult as soon as it is known
        """
        self.archiver = archiver
        self.output_dir = Path(output_dir)
        self.max_workers = max_workers or os.cpu_count() or 1
        self.on_result = on_result

    def _group_by_archive(self, entries: Sequence[Path]) -> Dict[str, List[Path]]:
        groups: Dict[str, List[Path]] = {}
        for entry in entries:
            name = archive_name_for(entry)
            if name is None:
                # Unnamed entries are skipped individually, never grouped
                groups[f"\0{entry}"] = [entry]
                continue
            groups.setdefault(name, []).append(entry)

        for name, group in groups.items():
            if len(group) > 1:
                names = ", ".join(path.name for path in group)
                logger.warning(f"Entries {names} all map to {name}; {group[-1].name} will be kept")
        return groups

    def _run_group(self, group: List[Path], password: str) -> List[EntryResult]:
        results = []
        for entry in group:
            result = archive_entry(self.archiver, entry, password, self.output_dir)
            if self.on_result is not None:
                self.on_result(result)
            results.append(result)
        return results

    def run(self, entries: Sequence[Path], password: str) -> ArchiveSummary:
        """
        Archive every entry and wait for all of them to finish.

        Args:
            entries: Entries to archive, already fully enumerated
            password: Password applied to every archive

        Returns:
            Summary with one result per entry, in the order entries were given
        """
        groups = self._group_by_archive(entries)
        if not groups:
            logger.info("Nothing to archive")
            return ArchiveSummary()

        by_entry: Dict[Path, EntryResult] = {}
        workers = min(self.max_workers, len(groups))
        logger.debug(f"Archiving {len(entries)} entries with {workers} workers")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dirzip") as executor:
            futures = [executor.submit(self._run_group, group, password) for group in groups.values()]
            for future in futures:
                for result in future.result():
                    by_entry[result.entry] = result

        summary = ArchiveSummary(results=[by_entry[entry] for entry in entries])
        logger.info(f"Finished: {summary.describe()}")
        return summary
