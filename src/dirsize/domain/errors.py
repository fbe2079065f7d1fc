from __future__ import annotations

"""
Scan Error Taxonomy.

Fatal errors abort the whole run. Traversal errors abort only the size
computation of one top-level entry and are downgraded to EntryFailure
records by the collector.
"""

from typing import Optional


class DirSizeError(Exception):
    """Base class for all scan errors."""


class FatalInputError(DirSizeError):
    """The root directory cannot be listed. Nothing can be reported."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot list directory '{path}'{detail}")


class TraversalError(DirSizeError):
    """A recursive size walk hit an unreadable or vanished entry."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Traversal failed at '{path}'{detail}")
