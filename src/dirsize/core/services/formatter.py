from __future__ import annotations

"""
Size Formatter.

Converts byte counts into short human-readable strings using binary
(1024-based) unit steps, capped at terabytes.
"""

from typing import List

# Index 0 is only reached for values below 1024, which use BYTE_LABEL instead.
SIZE_UNITS: List[str] = ["b", "Kb", "Mb", "Gb", "Tb"]
BYTE_LABEL = "B"
UNIT_STEP = 1024


def format_size(size_bytes: int) -> str:
    """
    Render a byte count with two decimals and a unit label.

    Values below 1024 are shown in bytes ("10.00 B"). Larger values are
    divided by 1024 until they drop below 1024 or the last unit (Tb) is
    reached, so arbitrarily large sizes stay in Tb.

    Args:
        size_bytes: Non-negative size in bytes.

    Returns:
        str: Formatted size, e.g. "4.88 Kb".

    Raises:
        ValueError: If size_bytes is negative.
    """
    if size_bytes < 0:
        raise ValueError(f"Size cannot be negative: {size_bytes}")

    if size_bytes < UNIT_STEP:
        return f"{size_bytes}.00 {BYTE_LABEL}"

    # Integer arithmetic throughout: sizes may exceed the float range.
    unit_index = 0
    while size_bytes >= UNIT_STEP ** (unit_index + 1) and unit_index < len(SIZE_UNITS) - 1:
        unit_index += 1

    divisor = UNIT_STEP ** unit_index
    hundredths, remainder = divmod(size_bytes * 100, divisor)
    # Round half to even, like "%.2f" on an exact quotient
    if 2 * remainder > divisor or (2 * remainder == divisor and hundredths % 2):
        hundredths += 1

    whole, fraction = divmod(hundredths, 100)
    return f"{whole}.{fraction:02d} {SIZE_UNITS[unit_index]}"
