from __future__ import annotations

"""
Scan Configuration Model.

Holds the validated inputs of a single run. Built once by the interface
layer and passed by value into the scan pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# SORT DIRECTION
# -----------------------------------------------------------------------------

class SortDirection(str, Enum):
    """Ordering of the report by size. Values are the literal CLI tokens."""
    ASCENDING = "ASK"
    DESCENDING = "DESC"

    @classmethod
    def tokens(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, token: str) -> "SortDirection":
        """
        Resolve a CLI token into a direction.

        Args:
            token: "ASK" or "DESC" (surrounding whitespace is ignored).

        Returns:
            SortDirection: The matching direction.

        Raises:
            ValueError: If the token is not recognized.
        """
        cleaned = (token or "").strip()
        for member in cls:
            if member.value == cleaned:
                return member
        raise ValueError(
            f"Unknown sort direction '{token}'. Expected one of: {', '.join(cls.tokens())}"
        )


DEFAULT_SORT_DIRECTION = SortDirection.ASCENDING

# -----------------------------------------------------------------------------
# RUNTIME CONFIGURATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanConfig:
    """
    Immutable specification of a scan.

    Attributes:
        root: Directory whose immediate entries are reported.
        sort_direction: Ordering applied to the report.
    """
    root: str
    sort_direction: SortDirection = DEFAULT_SORT_DIRECTION
