"""Listing of the entries to archive under a root directory."""

import os
import logging
from pathlib import Path
from typing import List, Union

from dirzip.core.errors import InvalidInputError

logger = logging.getLogger(__name__)


def enumerate_entries(root: Union[str, Path]) -> List[Path]:
    """
    List the immediate children of root, files and directories alike.

    Children that cannot be inspected while listing are skipped. The result is
    sorted by name so that later steps see a stable order.

    Args:
        root: Directory whose children should be archived

    Returns:
        List of child paths

    Raises:
        InvalidInputError: If root does not exist, is not a directory, or cannot be listed
    """
    root = Path(root)
    if not root.is_dir():
        raise InvalidInputError("The provided path is not a valid directory.")

    entries = []
    try:
        with os.scandir(root) as it:
            for dir_entry in it:
                try:
                    # Touch the entry so vanished or unreadable children are dropped here
                    dir_entry.is_dir()
                    entries.append(Path(dir_entry.path))
                except OSError as e:
                    logger.debug(f"Skipping {dir_entry.path}: {e}")
    except OSError as e:
        raise InvalidInputError(f"Unable to read the directory {root}: {e}") from e

    entries.sort(key=lambda path: path.name)
    logger.debug(f"Found {len(entries)} entries in {root}")
    return entries
