"""Physical storage layout access.

This module provides NAMASTE-based root and object detection and the
directory walk primitive used for filesystem descent.
"""

from ocflwalk.layout.dirwalk import DirCallback, WalkAction, walk_dir
from ocflwalk.layout.probe import (
    find_nearest_root,
    is_root,
    nearest_root_path,
    object_ref,
    root_ref,
)

__all__ = [
    "DirCallback",
    "WalkAction",
    "find_nearest_root",
    "is_root",
    "nearest_root_path",
    "object_ref",
    "root_ref",
    "walk_dir",
]
