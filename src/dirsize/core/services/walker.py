from __future__ import annotations

"""
Directory Size Walker.

Computes the recursive size of a directory as the sum of the regular
files it contains. Directory entries contribute nothing of their own and
symbolic links are never followed. The walk is single-threaded and fails
fast: the first unreadable entry aborts the whole computation.
"""

import logging
import os
import stat as statmod
from typing import List

from dirsize.domain.errors import TraversalError

logger = logging.getLogger(__name__)


def compute_directory_size(path: str) -> int:
    """
    Sum the sizes of all regular files below a directory.

    Traverses depth-first with an explicit stack, so deep trees do not hit
    the interpreter recursion limit.

    Args:
        path: Directory to measure.

    Returns:
        int: Total size in bytes of every regular file in the subtree.

    Raises:
        TraversalError: If any directory cannot be listed or any entry
                        cannot be stat'ed. No partial total is returned.
    """
    total = 0
    pending: List[str] = [path]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        st = entry.stat(follow_symlinks=False)
                    except OSError as e:
                        raise TraversalError(entry.path, e) from e

                    mode = st.st_mode
                    if statmod.S_ISDIR(mode):
                        pending.append(entry.path)
                    elif statmod.S_ISREG(mode):
                        total += st.st_size
        except OSError as e:
            raise TraversalError(current, e) from e

    logger.debug(f"Walked '{path}': {total} bytes")
    return total
