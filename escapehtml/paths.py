"""
Path classification.

Every query stats the path afresh; nothing is cached between calls.
"""

import os
import stat
from enum import Enum
from typing import Optional

from .errors import PathNotFoundError


class PathKind(Enum):
    """What an existing path points at."""
    DIRECTORY = "directory"
    REGULAR_FILE = "regular_file"


def classify(path: str) -> PathKind:
    """
    Classify an existing path as a directory or a file.

    Symbolic links are followed. Anything that is not a directory
    (sockets, fifos, devices included) counts as a regular file.

    Args:
        path: Absolute or relative path

    Returns:
        PathKind of the entry

    Raises:
        PathNotFoundError: If nothing exists at path
        OSError: If the entry exists but its metadata cannot be read
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        raise PathNotFoundError(path) from None
    if stat.S_ISDIR(st.st_mode):
        return PathKind.DIRECTORY
    return PathKind.REGULAR_FILE


def exists(path: str) -> Optional[PathKind]:
    """Like classify(), but returns None for a missing path."""
    try:
        return classify(path)
    except PathNotFoundError:
        return None
