from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory-tree fixtures with known file sizes.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def _write_bytes(path: Path, size: int) -> Path:
    """Create a file of exactly `size` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    """
    Create the reference directory used across tests.

    Structure:
    /root
      a.txt        10 bytes
      b.txt        2048 bytes
      /sub
        c.txt      5000 bytes
    """
    root = tmp_path / "root"
    root.mkdir()
    _write_bytes(root / "a.txt", 10)
    _write_bytes(root / "b.txt", 2048)
    _write_bytes(root / "sub" / "c.txt", 5000)
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """
    Create a multi-level tree whose regular files total 1 + 20 + 300 + 4000 bytes.

    Structure:
    /nested
      top.bin              1
      /level1
        one.bin            20
        /empty
        /level2
          two.bin          300
          /level3
            three.bin      4000
    """
    root = tmp_path / "nested"
    _write_bytes(root / "top.bin", 1)
    _write_bytes(root / "level1" / "one.bin", 20)
    (root / "level1" / "empty").mkdir()
    _write_bytes(root / "level1" / "level2" / "two.bin", 300)
    _write_bytes(root / "level1" / "level2" / "level3" / "three.bin", 4000)
    return root
