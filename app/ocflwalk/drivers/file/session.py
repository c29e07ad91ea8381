"""Staging session for content destined for an OCFL object.

Content put through a session is staged in a private temporary
directory, keyed by logical path. Nothing is written to the storage
root; committing staged content into a new object version is not
supported.
"""

import logging
import shutil
import tempfile
from pathlib import Path, PurePosixPath
from typing import BinaryIO

from ocflwalk.core.errors import InvalidLogicalPathError
from ocflwalk.drivers.base import Options, Session
from ocflwalk.models.entity import EntityRef

logger = logging.getLogger(__name__)


def validate_logical_path(logical_path: str) -> PurePosixPath:
    """Validate a version-relative logical path.

    Args:
        logical_path: Slash-separated logical path.

    Returns:
        The path as a PurePosixPath.

    Raises:
        InvalidLogicalPathError: If the path is empty, absolute, or has
            empty, "." or ".." segments.
    """
    if not logical_path or logical_path.startswith("/"):
        raise InvalidLogicalPathError(logical_path)
    segments = logical_path.split("/")
    if any(s in ("", ".", "..") for s in segments):
        raise InvalidLogicalPathError(logical_path)
    return PurePosixPath(logical_path)


class StagingSession(Session):
    """Session that stages content for a single object.

    Args:
        object_id: Id of the object the content is destined for.
        options: Session options.
        obj: Reference of the existing object, or None for a new one.
    """

    def __init__(self, object_id: str, options: Options, obj: EntityRef | None = None) -> None:
        self.object_id = object_id
        self.options = options
        self.object = obj
        self._staging_dir = Path(tempfile.mkdtemp(prefix="ocflwalk-stage-"))
        self._staged: dict[str, Path] = {}

    @property
    def is_new(self) -> bool:
        """True if the session creates a new object."""
        return self.object is None

    @property
    def staged(self) -> dict[str, Path]:
        """Staged logical paths and the files holding their content."""
        return dict(self._staged)

    def put(self, logical_path: str, reader: BinaryIO) -> None:
        """Stage content at a logical path, replacing earlier content.

        Raises:
            InvalidLogicalPathError: If the logical path is invalid.
            RuntimeError: If the session has been closed.
        """
        if not self._staging_dir.exists():
            msg = f"Session for {self.object_id} is closed"
            raise RuntimeError(msg)

        target = self._staging_dir.joinpath(*validate_logical_path(logical_path).parts)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            shutil.copyfileobj(reader, f)

        self._staged[logical_path] = target
        logger.debug("Staged %s for %s", logical_path, self.object_id)

    def close(self) -> None:
        """Discard all staged content."""
        shutil.rmtree(self._staging_dir, ignore_errors=True)
        self._staged.clear()

    def __enter__(self) -> "StagingSession":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()
