from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Sort direction token parsing.
2. Immutability of frozen dataclasses.
3. JSON serialization of scan results.
"""

import dataclasses

import pytest

from dirsize.domain.config import ScanConfig, SortDirection
from dirsize.domain.errors import FatalInputError, TraversalError
from dirsize.domain.models import (
    CollectionResult,
    EntryFailure,
    FileProperty,
    FileType,
    RankedEntry,
    ReportRow,
    ScanResult,
)


def test_sort_direction_parse_tokens():
    """Verify the literal CLI tokens map to directions."""
    assert SortDirection.parse("ASK") is SortDirection.ASCENDING
    assert SortDirection.parse(" DESC ") is SortDirection.DESCENDING
    assert SortDirection.tokens() == ["ASK", "DESC"]


@pytest.mark.parametrize("token", ["", "asc", "desc", "ASC", None])
def test_sort_direction_rejects_unknown(token):
    """Verify anything but ASK/DESC is rejected."""
    with pytest.raises(ValueError):
        SortDirection.parse(token)


def test_scan_config_defaults_and_immutability():
    """Verify ScanConfig defaults to ascending and cannot be mutated."""
    cfg = ScanConfig(root="/data")
    assert cfg.sort_direction is SortDirection.ASCENDING

    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.root = "/other"  # type: ignore[misc]


def test_collection_result_ok_flag():
    """Verify ok reflects the presence of failures."""
    assert CollectionResult(root="/r").ok is True
    failed = CollectionResult(root="/r", failures=[EntryFailure("x", "stat", "denied")])
    assert failed.ok is False


def test_scan_result_to_dict():
    """Verify the JSON payload pairs entries with their display rows."""
    result = ScanResult(
        root="/r",
        direction=SortDirection.DESCENDING,
        entries=[RankedEntry("sub", FileProperty(FileType.DIRECTORY, 5000))],
        rows=[ReportRow("sub", "dir", "4.88 Kb")],
        failures=[EntryFailure("gone", "walk", "vanished")],
    )

    assert result.to_dict() == {
        "root": "/r",
        "sort": "DESC",
        "partial": True,
        "entries": [
            {"name": "sub", "type": "dir", "size": 5000, "size_display": "4.88 Kb"},
        ],
        "failures": [{"name": "gone", "reason": "walk", "error": "vanished"}],
    }


def test_error_messages_carry_path_and_cause():
    """Verify errors expose the failing path and original exception."""
    cause = PermissionError(13, "Permission denied")
    fatal = FatalInputError("/root", cause)
    walk = TraversalError("/root/sub", cause)

    assert fatal.path == "/root" and fatal.cause is cause
    assert "/root/sub" in str(walk)
    assert "Permission denied" in str(walk)
