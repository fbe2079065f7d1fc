from __future__ import annotations

"""
Scan Domain Data Models.

Defines the immutable records exchanged between the collection, ranking
and reporting stages. Nothing here performs I/O.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from dirsize.domain.config import SortDirection

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

class FileType(str, Enum):
    """Kind of a top-level entry. The value is the label shown in reports."""
    FILE = "file"
    DIRECTORY = "dir"


@dataclass(frozen=True)
class FileProperty:
    """
    Size information for a single entry of the scanned directory.

    Attributes:
        type: Whether the entry is a file or a directory.
        size: Total size in bytes. For directories, the recursive sum of
              the regular files they contain.
    """
    type: FileType
    size: int


@dataclass(frozen=True)
class RankedEntry:
    """A named entry in its final report position."""
    name: str
    property: FileProperty


@dataclass(frozen=True)
class ReportRow:
    """
    Display-ready record handed to the table renderer.

    Attributes:
        name: Entry name within the scanned directory.
        type: "file" or "dir".
        size_display: Human-readable size (e.g. "4.88 Kb").
    """
    name: str
    type: str
    size_display: str

# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

REASON_STAT = "stat"
REASON_WALK = "walk"


@dataclass(frozen=True)
class EntryFailure:
    """
    Encapsulates why a single entry is missing from the report.

    Attributes:
        name: Entry name within the scanned directory.
        reason: "stat" when the entry itself could not be inspected,
                "walk" when its recursive size computation failed.
        error: Descriptive exception message.
    """
    name: str
    reason: str
    error: str

# -----------------------------------------------------------------------------
# AGGREGATES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CollectionResult:
    """
    Outcome of collecting every immediate child of a directory.

    Attributes:
        root: Absolute path of the listed directory.
        properties: Entry name -> size information for successful entries.
        failures: Entries that were skipped, one record each.
    """
    root: str
    properties: Dict[str, FileProperty] = field(default_factory=dict)
    failures: List[EntryFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class ScanResult:
    """
    Unified result object of a complete scan.

    Attributes:
        root: Absolute path of the scanned directory.
        direction: Sort direction applied to the entries.
        entries: Entries ordered for display.
        rows: Display-ready rows, in the same order as entries.
        failures: Entries omitted from the report.
    """
    root: str
    direction: SortDirection
    entries: List[RankedEntry] = field(default_factory=list)
    rows: List[ReportRow] = field(default_factory=list)
    failures: List[EntryFailure] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into plain JSON-compatible structures."""
        return {
            "root": self.root,
            "sort": self.direction.value,
            "partial": self.partial,
            "entries": [
                {
                    "name": entry.name,
                    "type": entry.property.type.value,
                    "size": entry.property.size,
                    "size_display": row.size_display,
                }
                for entry, row in zip(self.entries, self.rows)
            ],
            "failures": [
                {"name": f.name, "reason": f.reason, "error": f.error}
                for f in self.failures
            ],
        }
