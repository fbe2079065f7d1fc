from __future__ import annotations

"""
Report Renderer.

Turns display rows into aligned text columns (Name, Type, Size) and
formats skipped entries for the error stream.
"""

from typing import List, Sequence

from dirsize.domain.models import EntryFailure, ReportRow
from dirsize.utils.i18n import i18n

COLUMN_PADDING = 3


def render_table(rows: Sequence[ReportRow], headers: Sequence[str] = ()) -> List[str]:
    """
    Lay out rows as left-aligned columns under a header line.

    Every column except the last is padded to its widest cell plus
    COLUMN_PADDING spaces.

    Args:
        rows: Display rows in report order.
        headers: Column titles; defaults to the localized Name/Type/Size.

    Returns:
        List[str]: Output lines, header first.
    """
    if not headers:
        headers = (
            i18n.t("cli.headers.name"),
            i18n.t("cli.headers.type"),
            i18n.t("cli.headers.size"),
        )

    table = [list(headers)] + [[r.name, r.type, r.size_display] for r in rows]
    widths = [max(len(line[i]) for line in table) + COLUMN_PADDING for i in range(len(headers) - 1)]

    lines: List[str] = []
    for cells in table:
        padded = [cell.ljust(widths[i]) for i, cell in enumerate(cells[:-1])]
        lines.append("".join(padded) + cells[-1])
    return lines


def render_failures(failures: Sequence[EntryFailure]) -> List[str]:
    """One line per skipped entry."""
    return [
        i18n.t("cli.errors.entry", name=f.name, error=f.error)
        for f in failures
    ]
