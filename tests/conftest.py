"""Pytest configuration and shared fixtures.

This module builds real OCFL storage roots on disk for the tests.
"""

import hashlib
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from ocflwalk.walk.events import WalkEvent

ROOT_DECLARATION = "0=ocfl_1.1"
OBJECT_DECLARATION = "0=ocfl_object_1.1"

# version id -> {logical path: content}
VersionFiles = dict[str, dict[str, str]]


def write_root(path: Path) -> Path:
    """Create an OCFL storage root at ``path``."""
    path.mkdir(parents=True, exist_ok=True)
    (path / ROOT_DECLARATION).write_text("ocfl_1.1\n")
    return path


def write_object(path: Path, object_id: str, versions: VersionFiles) -> Path:
    """Create an OCFL object with the given versions at ``path``.

    Content is deduplicated across versions: a file whose content is
    unchanged is stored once, under the version that introduced it.
    """
    path.mkdir(parents=True)
    (path / OBJECT_DECLARATION).write_text("ocfl_object_1.1\n")

    manifest: dict[str, list[str]] = {}
    inventory_versions: dict[str, dict[str, object]] = {}
    for version_id, files in versions.items():
        state: dict[str, list[str]] = {}
        for logical_path, content in files.items():
            digest = hashlib.sha512(content.encode()).hexdigest()
            if digest not in manifest:
                content_path = f"{version_id}/content/{logical_path}"
                (path / content_path).parent.mkdir(parents=True, exist_ok=True)
                (path / content_path).write_text(content)
                manifest[digest] = [content_path]
            state.setdefault(digest, []).append(logical_path)
        (path / version_id).mkdir(exist_ok=True)
        inventory_versions[version_id] = {
            "created": "2024-01-15T10:00:00Z",
            "message": f"Add {version_id}",
            "user": {"name": "Tester", "address": "mailto:tester@example.org"},
            "state": state,
        }

    inventory = {
        "id": object_id,
        "type": "https://ocfl.io/1.1/spec/#inventory",
        "digestAlgorithm": "sha512",
        "head": list(versions)[-1],
        "contentDirectory": "content",
        "manifest": manifest,
        "versions": inventory_versions,
    }
    (path / "inventory.json").write_text(json.dumps(inventory))
    return path


@dataclass(frozen=True)
class OcflTree:
    """Paths of the standard test storage root.

    Layout::

        root/
          ab/cd/obj-A/   v1: a.txt        v2: a.txt, b.txt
          ef/obj-B/      v1: c.txt
          ef/notes.txt   (plain file, ignored)
    """

    root: Path
    obj_a: Path
    obj_b: Path


class EventRecorder:
    """Walk observer that keeps every event it receives."""

    def __init__(self, min_level: int = logging.NOTSET) -> None:
        self.min_level = min_level
        self.events: list[WalkEvent] = []

    def __call__(self, event: WalkEvent) -> None:
        if event.level >= self.min_level:
            self.events.append(event)

    def names(self) -> list[str]:
        """Names of the recorded events, in emission order."""
        return [e.name for e in self.events]


@pytest.fixture
def make_object() -> Callable[[Path, str, VersionFiles], Path]:
    """Factory creating OCFL objects on disk."""
    return write_object


@pytest.fixture
def ocfl_root(tmp_path: Path) -> Path:
    """An empty OCFL storage root."""
    return write_root(tmp_path / "root")


@pytest.fixture
def ocfl_tree(ocfl_root: Path) -> OcflTree:
    """A storage root with two objects under different intermediate nesting."""
    obj_a = write_object(
        ocfl_root / "ab" / "cd" / "obj-A",
        "obj-A",
        {
            "v1": {"a.txt": "alpha"},
            "v2": {"a.txt": "alpha", "b.txt": "beta"},
        },
    )
    obj_b = write_object(ocfl_root / "ef" / "obj-B", "obj-B", {"v1": {"c.txt": "gamma"}})
    (ocfl_root / "ef" / "notes.txt").write_text("not an object")
    return OcflTree(root=ocfl_root, obj_a=obj_a, obj_b=obj_b)


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate CLI runs from the user's configuration.

    Returns:
        The ocflwalk configuration directory (not created).
    """
    config_home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("OCFL_ROOT", raising=False)
    return config_home / "ocflwalk"


@pytest.fixture
def event_recorder() -> EventRecorder:
    """A walk observer recording every event."""
    return EventRecorder()
