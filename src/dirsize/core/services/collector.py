from __future__ import annotations

"""
Parallel Entry Collector.

Lists the immediate children of a directory and measures each of them in
its own worker thread. Workers never touch shared state: each one returns
a local outcome, and the calling thread merges the outcomes into the final
map as futures complete. Failures of single entries are recorded and the
collection continues; only an unreadable root aborts the operation.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional

from dirsize.core.services.walker import compute_directory_size
from dirsize.domain.errors import FatalInputError, TraversalError
from dirsize.domain.models import (
    REASON_STAT,
    REASON_WALK,
    CollectionResult,
    EntryFailure,
    FileProperty,
    FileType,
)
from dirsize.infra.fs import join_entry_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListedEntry:
    """A child of the root as seen by the listing; links are not followed."""
    name: str
    is_dir: bool


@dataclass(frozen=True)
class EntryOutcome:
    """Result of measuring one entry: exactly one of property/failure is set."""
    name: str
    property: Optional[FileProperty] = None
    failure: Optional[EntryFailure] = None

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_entries(root_path: str) -> CollectionResult:
    """
    Measure every immediate entry of a directory concurrently.

    One worker is started per entry. Directories report the recursive size
    computed by the walker; every other entry, including a symlink to a
    directory, reports its own stat size. The function returns only after
    every worker has finished.

    Args:
        root_path: Directory to list.

    Returns:
        CollectionResult: Successful entries by name plus per-entry failures.

    Raises:
        FatalInputError: If root_path does not exist, is not a directory
                         or cannot be read.
    """
    listed = list_entries(root_path)
    logger.info(f"Collecting {len(listed)} entries in: {root_path}")

    properties: Dict[str, FileProperty] = {}
    failures: List[EntryFailure] = []

    if not listed:
        return CollectionResult(root=root_path, properties=properties, failures=failures)

    with ThreadPoolExecutor(max_workers=len(listed), thread_name_prefix="dirsize") as executor:
        futures = [
            executor.submit(measure_entry, root_path, entry.name, entry.is_dir)
            for entry in listed
        ]

        # Single writer: only this thread mutates the result containers
        for future in as_completed(futures):
            outcome = future.result()
            if outcome.property is not None:
                properties[outcome.name] = outcome.property
            elif outcome.failure is not None:
                failures.append(outcome.failure)

    failures.sort(key=lambda f: f.name)
    logger.debug(
        f"Collection finished: {len(properties)} measured, {len(failures)} skipped."
    )
    return CollectionResult(root=root_path, properties=properties, failures=failures)


def list_entries(root_path: str) -> List[ListedEntry]:
    """
    Return the immediate children of a directory, sorted by name.

    Each child is classified from the listing itself without following
    symlinks, so a link to a directory is not treated as a directory.

    Raises:
        FatalInputError: If the directory cannot be listed.
    """
    listed: List[ListedEntry] = []
    try:
        with os.scandir(root_path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    # measure_entry reports the stat failure for this entry
                    is_dir = False
                listed.append(ListedEntry(name=entry.name, is_dir=is_dir))
    except OSError as e:
        logger.error(f"Cannot list root directory '{root_path}': {e}")
        raise FatalInputError(root_path, e) from e

    listed.sort(key=lambda entry: entry.name)
    return listed


def measure_entry(root_path: str, name: str, is_dir: bool) -> EntryOutcome:
    """
    Size a single entry. Runs inside a worker thread.

    The entry is stat'ed following symlinks for its own size. Only real
    directories (is_dir from the listing) are walked, and the walker below
    them never follows links.

    Args:
        root_path: Parent directory.
        name: Entry name within root_path.
        is_dir: Whether the listing classified the entry as a directory.

    Returns:
        EntryOutcome: The measured property, or a failure record.
    """
    entry_path = join_entry_path(root_path, name)

    try:
        st = os.stat(entry_path)
    except OSError as e:
        logger.info(f"Skipping '{name}': cannot stat entry: {e}")
        return EntryOutcome(name=name, failure=EntryFailure(name, REASON_STAT, str(e)))

    if not is_dir:
        return EntryOutcome(name=name, property=FileProperty(FileType.FILE, st.st_size))

    try:
        size = compute_directory_size(entry_path)
    except TraversalError as e:
        logger.info(f"Skipping '{name}': {e}")
        return EntryOutcome(name=name, failure=EntryFailure(name, REASON_WALK, str(e)))

    return EntryOutcome(name=name, property=FileProperty(FileType.DIRECTORY, size))
