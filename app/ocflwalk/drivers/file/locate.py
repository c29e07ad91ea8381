"""Resolution of walk locations into entity references.

A location is either one filesystem path, classified by probing the
storage layout around it, or a sequence of logical coordinates
(object id, version id, logical path) resolved under a storage root.
"""

import os
from pathlib import Path

from ocflwalk.core.errors import (
    EntityNotFoundError,
    InvalidLocationError,
    ObjectNotFoundError,
)
from ocflwalk.core.paths import absolute_path
from ocflwalk.inventory.loader import load_inventory
from ocflwalk.layout.probe import find_nearest_root, is_root, nearest_root_path, root_ref
from ocflwalk.models.entity import EntityRef, EntityType
from ocflwalk.walk.events import WalkObserver
from ocflwalk.walk.scope import Scope

MAX_COORDINATES = 3


def is_physical(location: str) -> bool:
    """Check whether a single location names an existing filesystem path."""
    return os.path.lexists(location)


def locate_path(location: str | Path) -> EntityRef:
    """Classify a filesystem path as an OCFL entity.

    Args:
        location: Path of a storage root, intermediate directory, object
            root, version directory or content file.

    Returns:
        Reference to the entity at that path, with its parent chain.

    Raises:
        RootNotFoundError: If the path is not under a storage root.
        EntityNotFoundError: If the path is inside an object but is not
            a version directory or a content file of that version.
        InvalidLocationError: If the path is a plain file outside objects.
    """
    path = absolute_path(location)

    if is_root(path, EntityType.ROOT)[0]:
        return root_ref(path)

    root = find_nearest_root(EntityRef(addr=str(path)), EntityType.ROOT)
    object_path = nearest_root_path(path, EntityType.OBJECT)

    if object_path is None:
        if not path.is_dir():
            msg = f"{path} is neither a directory nor inside an OCFL object"
            raise InvalidLocationError(msg)
        return EntityRef(
            id=path.relative_to(root.addr).as_posix(),
            addr=str(path),
            type=EntityType.INTERMEDIATE,
            parent=root,
        )

    inventory = load_inventory(object_path)
    obj = EntityRef(
        id=inventory.id,
        addr=str(object_path),
        type=EntityType.OBJECT,
        parent=root,
    )
    if path == object_path:
        return obj

    relative = path.relative_to(object_path)
    version_id = relative.parts[0]
    if version_id not in inventory.versions:
        raise EntityNotFoundError(path, inventory.id)

    version = EntityRef(
        id=version_id,
        addr=str(object_path / version_id),
        type=EntityType.VERSION,
        parent=obj,
    )
    if len(relative.parts) == 1:
        return version

    logical_path = inventory.physical_to_logical(version_id, relative.as_posix())
    if logical_path is None:
        raise EntityNotFoundError(path, inventory.id)

    return EntityRef(id=logical_path, addr=str(path), type=EntityType.FILE, parent=version)


def find_object(
    root: EntityRef, object_id: str, observer: WalkObserver | None = None
) -> EntityRef:
    """Find an object by id under a storage root.

    Raises:
        ObjectNotFoundError: If no object with that id exists.
    """
    for obj in Scope(root, EntityType.OBJECT, observer=observer).collect():
        if obj.id == object_id:
            return obj
    raise ObjectNotFoundError(object_id, root.addr)


def locate_coordinates(
    root: EntityRef, coords: tuple[str, ...], observer: WalkObserver | None = None
) -> EntityRef:
    """Resolve logical coordinates under a storage root.

    The version and logical path are not checked here; a walk started
    from the returned reference fails with VersionNotFoundError if the
    version does not exist, and reports nothing for an unknown path.

    Args:
        root: Storage root reference.
        coords: ``(object_id,)``, ``(object_id, version_id)`` or
            ``(object_id, version_id, logical_path)``.
        observer: Optional receiver of walk events for the object lookup.

    Returns:
        Reference of type OBJECT, VERSION or FILE.

    Raises:
        InvalidLocationError: If there are no or too many coordinates,
            or one of them is empty.
        ObjectNotFoundError: If the object does not exist.
    """
    if not coords or len(coords) > MAX_COORDINATES:
        msg = f"Expected 1 to {MAX_COORDINATES} logical coordinates, got {len(coords)}"
        raise InvalidLocationError(msg)
    if any(not c for c in coords):
        msg = f"Empty logical coordinate in {coords!r}"
        raise InvalidLocationError(msg)

    object_id, *rest = coords
    obj = find_object(root, object_id, observer)
    if not rest:
        return obj

    version = EntityRef(
        id=rest[0],
        addr=os.path.join(obj.addr, rest[0]),
        type=EntityType.VERSION,
        parent=obj,
    )
    if len(rest) == 1:
        return version

    return EntityRef(id=rest[1], type=EntityType.FILE, parent=version)
