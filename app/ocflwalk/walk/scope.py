"""Bounded walks over OCFL entities.

A Scope describes everything of one entity type "underneath" a
starting entity and walks it in two phases:

(a) from a storage root or intermediate directory, directories are
    walked until object roots are found;
(b) inside an object, versions and files are enumerated from the
    inventory rather than from the filesystem.

When the starting entity already has the desired type, the walk
resolves that one entity instead of enumerating many: candidates are
matched against the starting entity's logical coordinates.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path, PurePath

from ocflwalk.core.errors import VersionNotFoundError
from ocflwalk.core.paths import absolute_path
from ocflwalk.inventory.loader import load_inventory
from ocflwalk.inventory.models import Inventory, VersionMetadata
from ocflwalk.layout.dirwalk import WalkAction, walk_dir
from ocflwalk.layout.probe import find_nearest_root, is_root
from ocflwalk.models.entity import EntityRef, EntityType
from ocflwalk.walk.events import WalkEvent, WalkObserver

EntityCallback = Callable[[EntityRef], None]


class Scope:
    """A bounded set of OCFL entities of one type.

    Args:
        under: Entity to walk from (root, intermediate, object, version
            or file).
        desired: Entity type to report.
        head: If True, only the head version (and its files) of each
            object is considered.
        observer: Optional receiver of diagnostic WalkEvents.

    Raises:
        RootNotFoundError: If ``under`` has no enclosing storage root.
    """

    def __init__(
        self,
        under: EntityRef,
        desired: EntityType,
        *,
        head: bool = False,
        observer: WalkObserver | None = None,
    ) -> None:
        self.root = find_nearest_root(under, EntityType.ROOT)
        self._root_path = absolute_path(self.root.addr)
        self.start_from = under
        self.desired = under if under.type == desired else EntityRef(type=desired)
        self.head = head
        self._observer = observer

    @property
    def resolving(self) -> bool:
        """True if this scope resolves its starting entity instead of enumerating."""
        return self.desired is self.start_from

    def contains(self, ref: EntityRef) -> bool:
        """Decide whether an encountered entity is in scope.

        While enumerating, an entity is in scope iff it has the desired
        type. While resolving, it must also share the logical id of the
        starting entity at every ancestor depth.
        """
        if self.desired.type == EntityType.ANY:
            return True

        if not self.resolving:
            return ref.type == self.desired.type

        if ref.type != self.start_from.type:
            return False

        a, b = self.desired, ref
        while a.parent is not None and b.parent is not None:
            if a.id != b.id:
                return False
            a, b = a.parent, b.parent

        return ref.type <= self.desired.type

    def walk(self, callback: EntityCallback) -> None:
        """Invoke ``callback`` for every in-scope entity.

        Entities are reported in no particular order. The first
        exception raised by the callback, or by the traversal itself,
        stops the walk and propagates to the caller.

        Raises:
            DirectoryAccessError: If a directory cannot be listed.
            ObjectProbeError: If a directory cannot be probed.
            ManifestLoadError: If an object's inventory cannot be loaded.
            VersionNotFoundError: If the starting version does not exist.
        """
        node = self.start_from
        self._emit(
            logging.DEBUG,
            "walk.start",
            start=node.addr or "/".join(node.coords()),
            start_type=node.type.label,
            desired=self.desired.type.label,
            resolving=self.resolving,
        )

        if node.type >= EntityType.OBJECT:
            obj = find_nearest_root(node, EntityType.OBJECT)
            self._walk_object(Path(obj.addr), callback)
            self._emit(logging.DEBUG, "walk.done")
            return

        if node.type == EntityType.ROOT and self.contains(node):
            callback(node)

        if self.desired.type == EntityType.ROOT:
            self._emit(logging.DEBUG, "walk.done")
            return

        start_path = absolute_path(node.addr) if node.addr else self._root_path
        walk_dir(start_path, lambda p, d, s: self._visit(p, d, s, callback))
        self._emit(logging.DEBUG, "walk.done")

    def collect(self) -> list[EntityRef]:
        """Walk the scope and return every in-scope entity."""
        found: list[EntityRef] = []
        self.walk(found.append)
        return found

    def _visit(
        self, path: Path, is_dir: bool, is_symlink: bool, callback: EntityCallback
    ) -> WalkAction:
        """Handle one directory entry during filesystem descent."""
        # Regular files are never structural nodes
        if not is_dir:
            return WalkAction.SKIP_SUBTREE

        found, _ = is_root(path, EntityType.OBJECT)
        if found:
            if self.desired.type != EntityType.INTERMEDIATE:
                self._walk_object(path, callback)
            return WalkAction.SKIP_SUBTREE

        if path != self._root_path:
            intermediate = EntityRef(
                id=_relative_id(path, self._root_path),
                addr=str(path),
                type=EntityType.INTERMEDIATE,
                parent=self.root,
            )
            if self.contains(intermediate):
                callback(intermediate)

        return WalkAction.CONTINUE

    def _walk_object(self, path: Path, callback: EntityCallback) -> None:
        """Report an object and, if needed, its versions and files."""
        inventory = load_inventory(path)
        versions = self._select_versions(inventory)

        obj = EntityRef(
            id=inventory.id,
            addr=str(path),
            type=EntityType.OBJECT,
            parent=self.root,
        )
        self._emit(logging.DEBUG, "object.enter", id=obj.id, path=obj.addr)

        if self.contains(obj):
            callback(obj)

        if self.desired.type >= EntityType.VERSION:
            self._walk_versions(inventory, versions, obj, callback)

    def _select_versions(self, inventory: Inventory) -> dict[str, VersionMetadata]:
        """Pick the versions of an object that the walk descends into."""
        versions = inventory.versions

        # A specific version or file was asked for, not all of them
        if self.start_from.type in (EntityType.VERSION, EntityType.FILE):
            wanted = self.start_from.ancestor(EntityType.VERSION)
            version_id = wanted.id if wanted is not None else ""
            if version_id not in versions:
                raise VersionNotFoundError(version_id, inventory.id)
            versions = {version_id: versions[version_id]}

        if self.head:
            versions = {vid: meta for vid, meta in versions.items() if vid == inventory.head}

        self._emit(
            logging.DEBUG,
            "object.versions",
            id=inventory.id,
            count=len(versions),
        )
        return versions

    def _walk_versions(
        self,
        inventory: Inventory,
        versions: dict[str, VersionMetadata],
        obj: EntityRef,
        callback: EntityCallback,
    ) -> None:
        """Report versions of an object and, if needed, their files."""
        for version_id in versions:
            version = EntityRef(
                id=version_id,
                addr=os.path.join(obj.addr, version_id),
                type=EntityType.VERSION,
                parent=obj,
            )
            if self.contains(version):
                callback(version)

            if self.desired.type < EntityType.FILE:
                continue

            for item in inventory.files_in(version_id):
                file_ref = EntityRef(
                    id=item.logical_path,
                    addr=os.path.join(obj.addr, item.physical_path),
                    type=EntityType.FILE,
                    parent=version,
                )
                if self.contains(file_ref):
                    callback(file_ref)

    def _emit(self, level: int, name: str, **fields: object) -> None:
        if self._observer is not None:
            self._observer(WalkEvent(level=level, name=name, fields=fields))


def _relative_id(path: Path, root: Path) -> str:
    """Root-relative, slash-separated id of an intermediate directory."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return PurePath(os.path.relpath(path, root)).as_posix()
