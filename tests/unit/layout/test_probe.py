"""Unit tests for root and object detection."""

from pathlib import Path

import pytest
from conftest import OcflTree
from ocflwalk.core.errors import ManifestLoadError, RootNotFoundError
from ocflwalk.layout.probe import (
    find_nearest_root,
    is_root,
    nearest_root_path,
    object_ref,
    root_ref,
)
from ocflwalk.models.entity import EntityRef, EntityType


class TestIsRoot:
    """Tests for is_root."""

    def test_storage_root(self, ocfl_tree: OcflTree) -> None:
        """A storage root is detected with its declaration."""
        assert is_root(ocfl_tree.root, EntityType.ROOT) == (True, "ocfl_1.1")

    def test_object_root(self, ocfl_tree: OcflTree) -> None:
        """An object root is detected with its declaration."""
        assert is_root(ocfl_tree.obj_a, EntityType.OBJECT) == (True, "ocfl_object_1.1")

    def test_object_is_not_storage_root(self, ocfl_tree: OcflTree) -> None:
        """Object declarations do not mark storage roots."""
        assert is_root(ocfl_tree.obj_a, EntityType.ROOT) == (False, None)

    def test_storage_root_is_not_object(self, ocfl_tree: OcflTree) -> None:
        """Storage root declarations do not mark objects."""
        assert is_root(ocfl_tree.root, EntityType.OBJECT) == (False, None)

    def test_plain_directory(self, ocfl_tree: OcflTree) -> None:
        """Intermediate directories are neither."""
        assert is_root(ocfl_tree.root / "ab", EntityType.ROOT) == (False, None)
        assert is_root(ocfl_tree.root / "ab", EntityType.OBJECT) == (False, None)

    def test_file_is_never_root(self, ocfl_tree: OcflTree) -> None:
        """Regular files are never roots."""
        assert is_root(ocfl_tree.root / "ef" / "notes.txt", EntityType.OBJECT) == (False, None)

    def test_missing_path(self, tmp_path: Path) -> None:
        """Missing paths are never roots."""
        assert is_root(tmp_path / "missing", EntityType.ROOT) == (False, None)

    @pytest.mark.parametrize("entity_type", [EntityType.VERSION, EntityType.FILE])
    def test_rejects_unprobeable_types(self, tmp_path: Path, entity_type: EntityType) -> None:
        """Only roots and objects can be probed."""
        with pytest.raises(ValueError, match="Cannot probe"):
            is_root(tmp_path, entity_type)


class TestNearestRootPath:
    """Tests for nearest_root_path."""

    def test_root_from_content_file(self, ocfl_tree: OcflTree) -> None:
        """The storage root is found from deep inside an object."""
        path = ocfl_tree.obj_a / "v1" / "content" / "a.txt"

        assert nearest_root_path(path, EntityType.ROOT) == ocfl_tree.root

    def test_object_from_version(self, ocfl_tree: OcflTree) -> None:
        """The enclosing object is found from a version directory."""
        assert nearest_root_path(ocfl_tree.obj_a / "v2", EntityType.OBJECT) == ocfl_tree.obj_a

    def test_object_search_stops_at_storage_root(self, ocfl_tree: OcflTree) -> None:
        """No object encloses an intermediate directory."""
        assert nearest_root_path(ocfl_tree.root / "ab" / "cd", EntityType.OBJECT) is None

    def test_nothing_outside_roots(self, tmp_path: Path) -> None:
        """Paths outside storage roots have no enclosing root."""
        assert nearest_root_path(tmp_path, EntityType.ROOT) is None


class TestRefs:
    """Tests for root_ref and object_ref."""

    def test_root_ref(self, ocfl_tree: OcflTree) -> None:
        """root_ref builds an absolute root reference."""
        ref = root_ref(ocfl_tree.root)

        assert ref.type == EntityType.ROOT
        assert ref.addr == str(ocfl_tree.root)
        assert ref.parent is None

    def test_object_ref_reads_id(self, ocfl_tree: OcflTree) -> None:
        """object_ref takes the object id from the inventory."""
        root = root_ref(ocfl_tree.root)

        ref = object_ref(ocfl_tree.obj_b, root)

        assert ref.id == "obj-B"
        assert ref.parent is root

    def test_object_ref_without_inventory(self, ocfl_tree: OcflTree) -> None:
        """A missing inventory fails object_ref."""
        (ocfl_tree.obj_b / "inventory.json").unlink()

        with pytest.raises(ManifestLoadError):
            object_ref(ocfl_tree.obj_b, root_ref(ocfl_tree.root))


class TestFindNearestRoot:
    """Tests for find_nearest_root."""

    def test_prefers_parent_chain(self) -> None:
        """The logical parent chain is used without touching the filesystem."""
        root = EntityRef(addr="/nowhere", type=EntityType.ROOT)
        version = EntityRef(id="v1", type=EntityType.VERSION, parent=root)

        assert find_nearest_root(version, EntityType.ROOT) is root

    def test_self_is_nearest(self) -> None:
        """An entity of the requested type is its own nearest root."""
        root = EntityRef(addr="/nowhere", type=EntityType.ROOT)

        assert find_nearest_root(root, EntityType.ROOT) is root

    def test_probes_physical_ancestors(self, ocfl_tree: OcflTree) -> None:
        """Without a parent chain, the filesystem is probed."""
        ref = EntityRef(addr=str(ocfl_tree.obj_a / "v1" / "content"))

        obj = find_nearest_root(ref, EntityType.OBJECT)

        assert obj.id == "obj-A"
        assert obj.addr == str(ocfl_tree.obj_a)
        assert obj.parent is not None
        assert obj.parent.addr == str(ocfl_tree.root)

    def test_no_root(self, tmp_path: Path) -> None:
        """RootNotFoundError names the starting path."""
        with pytest.raises(RootNotFoundError) as exc_info:
            find_nearest_root(EntityRef(addr=str(tmp_path)), EntityType.ROOT)

        assert exc_info.value.path == str(tmp_path)

    def test_version_needs_parent_chain(self) -> None:
        """Versions cannot be found by probing."""
        with pytest.raises(RootNotFoundError, match="version"):
            find_nearest_root(EntityRef(addr="/nowhere"), EntityType.VERSION)
