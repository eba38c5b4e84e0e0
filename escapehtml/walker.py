"""
Source tree traversal.

Yields file paths lazily and never touches file contents, so the order can
be checked without doing any escaping.
"""

import logging
import os
from typing import Iterator

logger = logging.getLogger(__name__)


def iter_files(source: str) -> Iterator[str]:
    """
    Yield every non-directory path under source, depth first.

    A file source yields itself. Directory entries are visited in byte
    order of their names and subdirectories are descended at their place in that
    order. Symlinks to directories are yielded, not followed.

    Args:
        source: File or directory to walk, as typed by the user

    Yields:
        Paths joined onto source
    """
    if not os.path.isdir(source):
        yield source
        return
    yield from _walk_dir(source)


def _walk_dir(directory: str) -> Iterator[str]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: os.fsencode(e.name))
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", directory, e)
        return

    for entry in entries:
        path = os.path.join(directory, entry.name)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if is_dir:
            yield from _walk_dir(path)
        else:
            yield path
