"""Storage root and object root detection.

OCFL marks storage roots and object roots with NAMASTE declaration
files (``0=ocfl_1.1``, ``0=ocfl_object_1.1``, ...). This module probes
directories for those declarations and resolves the nearest enclosing
root or object of an entity.
"""

import logging
import os
from pathlib import Path

from ocflwalk.core.errors import ObjectProbeError, RootNotFoundError
from ocflwalk.core.paths import absolute_path
from ocflwalk.inventory.loader import load_inventory
from ocflwalk.models.entity import EntityRef, EntityType

logger = logging.getLogger(__name__)

_NAMASTE_PREFIX = "0="
_OBJECT_DECLARATION = "ocfl_object_"
_ROOT_DECLARATION = "ocfl_"


def _declarations(path: Path) -> list[str]:
    """List the NAMASTE declaration names present in a directory."""
    try:
        with os.scandir(path) as entries:
            return [
                entry.name[len(_NAMASTE_PREFIX) :]
                for entry in entries
                if entry.name.startswith(_NAMASTE_PREFIX)
            ]
    except OSError as e:
        raise ObjectProbeError(path, e.strerror or str(e)) from e


def _matches(declaration: str, entity_type: EntityType) -> bool:
    if entity_type == EntityType.OBJECT:
        return declaration.startswith(_OBJECT_DECLARATION)
    if entity_type == EntityType.ROOT:
        return declaration.startswith(_ROOT_DECLARATION) and not declaration.startswith(
            _OBJECT_DECLARATION
        )
    return False


def is_root(path: str | Path, entity_type: EntityType) -> tuple[bool, str | None]:
    """Check whether a directory is a root of the given type.

    Only ROOT (storage root) and OBJECT (object root) can be probed.
    Paths that are not directories are never roots.

    Args:
        path: Directory to probe. Symbolic links are followed.
        entity_type: EntityType.ROOT or EntityType.OBJECT.

    Returns:
        Tuple of (is_root, declaration), where declaration is the
        declared version string (e.g., "ocfl_object_1.1") when matched.

    Raises:
        ObjectProbeError: If the directory cannot be read.
    """
    if entity_type not in (EntityType.ROOT, EntityType.OBJECT):
        msg = f"Cannot probe for {entity_type.label} roots"
        raise ValueError(msg)

    path = Path(path)
    if not path.is_dir():
        return False, None

    for declaration in _declarations(path):
        if _matches(declaration, entity_type):
            return True, declaration
    return False, None


def nearest_root_path(path: str | Path, entity_type: EntityType) -> Path | None:
    """Find the nearest directory at or above ``path`` that is a root of a type.

    When looking for an object root the search stops at the first
    storage root, so objects are never resolved across storage roots.

    Args:
        path: Starting path (file or directory).
        entity_type: EntityType.ROOT or EntityType.OBJECT.

    Returns:
        Path of the matching directory, or None.

    Raises:
        ObjectProbeError: If a directory on the way cannot be read.
    """
    start = absolute_path(path)
    for candidate in (start, *start.parents):
        found, _ = is_root(candidate, entity_type)
        if found:
            return candidate
        if entity_type == EntityType.OBJECT and is_root(candidate, EntityType.ROOT)[0]:
            return None
    return None


def root_ref(path: str | Path) -> EntityRef:
    """Build the reference of a storage root."""
    return EntityRef(addr=str(absolute_path(path)), type=EntityType.ROOT)


def object_ref(path: str | Path, root: EntityRef) -> EntityRef:
    """Build the reference of an object root, reading its id from the inventory.

    Raises:
        ManifestLoadError: If the inventory cannot be loaded.
    """
    inventory = load_inventory(path)
    return EntityRef(
        id=inventory.id,
        addr=str(absolute_path(path)),
        type=EntityType.OBJECT,
        parent=root,
    )


def find_nearest_root(ref: EntityRef, entity_type: EntityType) -> EntityRef:
    """Resolve the nearest enclosing entity of the given type.

    The logical parent chain of ``ref`` (including ``ref`` itself) is
    consulted first. If it holds no entity of that type, storage and
    object roots are located by probing the physical ancestors of
    ``ref.addr``.

    Args:
        ref: Entity to start from.
        entity_type: Desired enclosing type.

    Returns:
        Reference to the enclosing entity.

    Raises:
        RootNotFoundError: If no enclosing entity of that type exists.
        ObjectProbeError: If a directory cannot be probed.
        ManifestLoadError: If an object's inventory cannot be read.
    """
    found = ref.ancestor(entity_type)
    if found is not None:
        return found

    if entity_type not in (EntityType.ROOT, EntityType.OBJECT) or not ref.addr:
        raise RootNotFoundError(ref.addr or "/".join(ref.coords()), entity_type.label)

    path = nearest_root_path(ref.addr, entity_type)
    if path is None:
        raise RootNotFoundError(ref.addr, entity_type.label)

    logger.debug("Nearest %s of %s is %s", entity_type.label, ref.addr, path)
    if entity_type == EntityType.ROOT:
        return root_ref(path)
    return object_ref(path, find_nearest_root(EntityRef(addr=str(path)), EntityType.ROOT))
