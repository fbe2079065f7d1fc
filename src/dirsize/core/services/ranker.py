from __future__ import annotations

"""
Entry Ranker.

Orders collected entries by size and prepares display rows.
"""

from typing import List, Mapping

from dirsize.core.services.formatter import format_size
from dirsize.domain.config import SortDirection
from dirsize.domain.models import FileProperty, RankedEntry, ReportRow


def rank_entries(
        properties: Mapping[str, FileProperty],
        direction: SortDirection,
) -> List[RankedEntry]:
    """
    Sort entries by size in the requested direction.

    Equal sizes are ordered by name ascending in both directions, so the
    output is deterministic regardless of collection order.

    Args:
        properties: Entry name -> size information.
        direction: Ascending or descending by size.

    Returns:
        List[RankedEntry]: Entries in report order.
    """
    # Two stable passes: secondary key first, then the primary key.
    ordered = sorted(properties.items(), key=lambda item: item[0])
    ordered.sort(
        key=lambda item: item[1].size,
        reverse=(direction is SortDirection.DESCENDING),
    )
    return [RankedEntry(name=name, property=prop) for name, prop in ordered]


def to_report_rows(ranked: List[RankedEntry]) -> List[ReportRow]:
    """Map ranked entries to display rows, keeping their order."""
    return [
        ReportRow(
            name=entry.name,
            type=entry.property.type.value,
            size_display=format_size(entry.property.size),
        )
        for entry in ranked
    ]
