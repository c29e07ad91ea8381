"""Entity models for OCFL storage hierarchies.

This module defines the ordered entity types of an OCFL layout and the
immutable references used to address a single root, intermediate
directory, object, version or logical file.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class EntityType(IntEnum):
    """Type of an OCFL entity, ordered by depth in the hierarchy.

    The ordering is semantic: ``ROOT < INTERMEDIATE < OBJECT < VERSION
    < FILE``. ``ANY`` is a wildcard that matches every type.

    Attributes:
        ROOT: OCFL storage root.
        INTERMEDIATE: Directory between the storage root and an object.
        OBJECT: OCFL object root.
        VERSION: A version of an object.
        FILE: A logical file within a version.
        ANY: Wildcard matching all of the above.
    """

    ROOT = 0
    INTERMEDIATE = 1
    OBJECT = 2
    VERSION = 3
    FILE = 4
    ANY = 5

    @property
    def label(self) -> str:
        """Lowercase display name (e.g., "object")."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "EntityType":
        """Look up an entity type by its case-insensitive name.

        Raises:
            ValueError: If the name does not denote an entity type.
        """
        try:
            return cls[label.strip().upper()]
        except KeyError:
            msg = f"Unknown entity type: {label!r}"
            raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class EntityRef:
    """Reference to a single OCFL entity.

    References are immutable values. ``parent`` points at the nearest
    ancestor that is not an intermediate node (objects point at their
    root, versions at their object, files at their version) and is
    only used to derive logical coordinates. Several siblings may share
    the same parent instance.

    Attributes:
        id: Logical id. Empty for roots and intermediates, the object id
            for objects, the version id for versions and the logical
            path for files.
        addr: Physical address (absolute file path or URI).
        type: Entity type.
        parent: Nearest non-intermediate ancestor, None for roots.
    """

    id: str = ""
    addr: str = ""
    type: EntityType = EntityType.ANY
    parent: "EntityRef | None" = field(default=None, repr=False)

    def coords(self) -> tuple[str, ...]:
        """Return the logical coordinates of this entity.

        Coordinates are the ids along the parent chain in root-to-leaf
        order, excluding the root, e.g. ``(object_id, version_id,
        logical_path)`` for a file.
        """
        coords: list[str] = []
        ref: EntityRef | None = self
        while ref is not None and ref.type != EntityType.ROOT:
            coords.append(ref.id)
            ref = ref.parent
        return tuple(reversed(coords))

    def ancestor(self, entity_type: EntityType) -> "EntityRef | None":
        """Return the closest entity of the given type along the parent chain.

        The entity itself is considered first.
        """
        ref: EntityRef | None = self
        while ref is not None:
            if ref.type == entity_type:
                return ref
            ref = ref.parent
        return None


@dataclass(frozen=True, slots=True)
class Select:
    """Desired properties of entities reported by a walk.

    Attributes:
        type: Desired entity type.
        head: If True, only versions and files of the head version are
            reported.
    """

    type: EntityType
    head: bool = False
