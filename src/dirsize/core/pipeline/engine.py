from __future__ import annotations

"""
Core scan pipeline.

Coordinates a complete run:
1. Normalizes the root path.
2. Collects the size of every immediate entry in parallel.
3. Ranks the entries by size.
4. Builds display rows for the reporter.
"""

import logging
import os
import time

from dirsize.core.services.collector import collect_entries
from dirsize.core.services.ranker import rank_entries, to_report_rows
from dirsize.domain.config import ScanConfig
from dirsize.domain.models import ScanResult
from dirsize.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_scan(config: ScanConfig) -> ScanResult:
    """
    Execute the full scan for one directory.

    Per-entry failures are carried in the result; the run itself only
    fails when the root directory cannot be listed.

    Args:
        config: Validated scan configuration.

    Returns:
        ScanResult: Ordered entries, display rows and skipped entries.

    Raises:
        FatalInputError: If the root directory cannot be listed.
    """
    t0 = time.perf_counter()
    root = normalize_path(config.root, os.getcwd())
    logger.info(f"Scan started: {root} (sort={config.sort_direction.value})")

    collection = collect_entries(root)
    entries = rank_entries(collection.properties, config.sort_direction)
    rows = to_report_rows(entries)

    elapsed = time.perf_counter() - t0
    logger.info(
        f"Scan finished in {elapsed:.3f}s. "
        f"Entries: {len(entries)}. Skipped: {len(collection.failures)}."
    )

    return ScanResult(
        root=root,
        direction=config.sort_direction,
        entries=entries,
        rows=rows,
        failures=list(collection.failures),
    )
