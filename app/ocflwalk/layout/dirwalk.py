"""Recursive directory enumeration with per-entry descent control.

The callback decides for every entry whether its subtree is walked
(WalkAction.CONTINUE) or treated as a leaf (WalkAction.SKIP_SUBTREE).
Aborting the whole walk is done by raising: any exception from the
callback propagates out of walk_dir unchanged.
"""

import logging
import os
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from ocflwalk.core.errors import DirectoryAccessError

logger = logging.getLogger(__name__)


class WalkAction(str, Enum):
    """Descent decision returned by a directory walk callback.

    Attributes:
        CONTINUE: Walk the children of this entry.
        SKIP_SUBTREE: Treat this entry as a leaf; siblings are still walked.
    """

    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"


# Callback receives (path, is_dir, is_symlink)
DirCallback = Callable[[Path, bool, bool], WalkAction]


def walk_dir(root: str | Path, callback: DirCallback) -> None:
    """Walk a directory tree, invoking ``callback`` for every entry.

    The root itself is passed to the callback first. Symbolic links are
    followed; a directory reachable more than once through links is
    passed to the callback only the first time it is met, so its
    subtree is never walked twice. Entries are visited in no particular
    order.

    Args:
        root: Directory to walk.
        callback: Called as ``callback(path, is_dir, is_symlink)``.

    Raises:
        DirectoryAccessError: If ``root`` does not exist or a directory
            cannot be listed.
    """
    root = Path(root)
    try:
        root.stat()
    except OSError as e:
        raise DirectoryAccessError(root, e.strerror or str(e)) from e

    seen: set[tuple[int, int]] = set()
    stack: list[tuple[Path, bool, bool]] = [(root, root.is_dir(), root.is_symlink())]

    while stack:
        path, is_dir, is_symlink = stack.pop()
        if is_dir:
            try:
                st = path.stat()
            except OSError as e:
                raise DirectoryAccessError(path, e.strerror or str(e)) from e
            key = (st.st_dev, st.st_ino)
            if key in seen:
                logger.debug("Skipping already visited directory %s", path)
                continue
            seen.add(key)

        action = callback(path, is_dir, is_symlink)
        if action == WalkAction.SKIP_SUBTREE or not is_dir:
            continue

        try:
            with os.scandir(path) as entries:
                children = [
                    (Path(entry.path), entry.is_dir(follow_symlinks=True), entry.is_symlink())
                    for entry in entries
                ]
        except OSError as e:
            raise DirectoryAccessError(path, e.strerror or str(e)) from e

        stack.extend(children)
