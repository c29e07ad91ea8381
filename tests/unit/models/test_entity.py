"""Unit tests for entity models."""

import pytest
from ocflwalk.models.entity import EntityRef, EntityType, Select


@pytest.fixture
def file_ref() -> EntityRef:
    """A file entity with a full parent chain."""
    root = EntityRef(addr="/srv/ocfl", type=EntityType.ROOT)
    obj = EntityRef(id="obj-A", addr="/srv/ocfl/obj-A", type=EntityType.OBJECT, parent=root)
    version = EntityRef(
        id="v2", addr="/srv/ocfl/obj-A/v2", type=EntityType.VERSION, parent=obj
    )
    return EntityRef(
        id="docs/a.txt",
        addr="/srv/ocfl/obj-A/v1/content/docs/a.txt",
        type=EntityType.FILE,
        parent=version,
    )


class TestEntityType:
    """Tests for EntityType ordering and lookup."""

    def test_types_are_ordered_by_depth(self) -> None:
        """Root < Intermediate < Object < Version < File."""
        assert (
            EntityType.ROOT
            < EntityType.INTERMEDIATE
            < EntityType.OBJECT
            < EntityType.VERSION
            < EntityType.FILE
        )

    def test_label_is_lowercase_name(self) -> None:
        """label returns the lowercase type name."""
        assert EntityType.OBJECT.label == "object"
        assert EntityType.ANY.label == "any"

    @pytest.mark.parametrize("label", ["file", "FILE", " File "])
    def test_from_label_is_case_insensitive(self, label: str) -> None:
        """from_label accepts any casing and surrounding whitespace."""
        assert EntityType.from_label(label) == EntityType.FILE

    def test_from_label_rejects_unknown(self) -> None:
        """from_label raises ValueError for unknown names."""
        with pytest.raises(ValueError, match="Unknown entity type"):
            EntityType.from_label("bucket")


class TestEntityRef:
    """Tests for EntityRef coordinates and ancestry."""

    def test_file_coords(self, file_ref: EntityRef) -> None:
        """A file's coordinates are (object id, version id, logical path)."""
        assert file_ref.coords() == ("obj-A", "v2", "docs/a.txt")

    def test_version_coords(self, file_ref: EntityRef) -> None:
        """A version's coordinates are (object id, version id)."""
        assert file_ref.parent is not None
        assert file_ref.parent.coords() == ("obj-A", "v2")

    def test_root_has_no_coords(self) -> None:
        """A root has empty coordinates."""
        assert EntityRef(addr="/srv/ocfl", type=EntityType.ROOT).coords() == ()

    def test_parent_chain_ends_at_root(self, file_ref: EntityRef) -> None:
        """Following parents terminates at a root without parent."""
        ref: EntityRef | None = file_ref
        last = file_ref
        while ref is not None:
            last = ref
            ref = ref.parent
        assert last.type == EntityType.ROOT
        assert last.parent is None

    def test_ancestor_includes_self(self, file_ref: EntityRef) -> None:
        """ancestor() considers the entity itself first."""
        assert file_ref.ancestor(EntityType.FILE) is file_ref

    def test_ancestor_finds_object(self, file_ref: EntityRef) -> None:
        """ancestor() walks up to the requested type."""
        obj = file_ref.ancestor(EntityType.OBJECT)
        assert obj is not None
        assert obj.id == "obj-A"

    def test_ancestor_missing_type(self, file_ref: EntityRef) -> None:
        """ancestor() returns None when no such type is on the chain."""
        assert file_ref.ancestor(EntityType.INTERMEDIATE) is None

    def test_refs_are_immutable(self, file_ref: EntityRef) -> None:
        """EntityRef is frozen."""
        with pytest.raises(AttributeError):
            file_ref.id = "other"  # type: ignore[misc]

    def test_equal_refs_hash_equal(self) -> None:
        """Structurally equal refs compare and hash equal."""
        root = EntityRef(addr="/r", type=EntityType.ROOT)
        a = EntityRef(id="x", addr="/r/x", type=EntityType.OBJECT, parent=root)
        b = EntityRef(id="x", addr="/r/x", type=EntityType.OBJECT, parent=root)
        assert a == b
        assert len({a, b}) == 1


class TestSelect:
    """Tests for Select."""

    def test_head_defaults_to_false(self) -> None:
        """Select.head is False unless requested."""
        assert Select(EntityType.FILE).head is False
