"""Exception hierarchy for ocflwalk.

Every error raised while resolving or walking OCFL entities derives
from OcflError and carries the offending path or identifier, both as
attributes and in its message. All of them are fatal to a walk in
progress.
"""

from pathlib import Path


class OcflError(Exception):
    """Base exception for all ocflwalk errors."""


class RootNotFoundError(OcflError):
    """Raised when no enclosing root of the requested type exists."""

    def __init__(self, path: str | Path, wanted: str = "root") -> None:
        self.path = str(path)
        self.wanted = wanted
        super().__init__(f"No OCFL {wanted} found at or above {self.path}")


class ObjectProbeError(OcflError):
    """Raised when a directory cannot be classified as root or object."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f"Cannot probe {self.path}: {reason}")


class ManifestLoadError(OcflError):
    """Raised when an object's inventory cannot be read or parsed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f"Cannot load inventory of {self.path}: {reason}")


class VersionNotFoundError(OcflError):
    """Raised when a named version does not exist in an object."""

    def __init__(self, version_id: str, object_id: str) -> None:
        self.version_id = version_id
        self.object_id = object_id
        super().__init__(f"No version {version_id} exists in {object_id}")


class DirectoryAccessError(OcflError):
    """Raised when a directory cannot be stat'ed or listed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f"Error walking directory {self.path}: {reason}")


class ObjectNotFoundError(OcflError):
    """Raised when no object with the given id exists under a root."""

    def __init__(self, object_id: str, root: str | Path) -> None:
        self.object_id = object_id
        self.root = str(root)
        super().__init__(f"No object {object_id} exists under {self.root}")


class EntityNotFoundError(OcflError):
    """Raised when a physical path inside an object maps to no entity."""

    def __init__(self, path: str | Path, object_id: str) -> None:
        self.path = str(path)
        self.object_id = object_id
        super().__init__(f"{self.path} is not a version or file of {object_id}")


class InvalidLocationError(OcflError):
    """Raised when a walk location cannot be interpreted."""


class InvalidLogicalPathError(OcflError):
    """Raised when a logical path is absolute or escapes its version."""

    def __init__(self, logical_path: str) -> None:
        self.logical_path = logical_path
        super().__init__(f"Invalid logical path: {logical_path!r}")


class NoSuitableDriverError(OcflError):
    """Raised when no configured driver can resolve the storage root."""

    def __init__(self, root: str | Path | None) -> None:
        self.root = str(root) if root is not None else None
        super().__init__(f"No suitable driver found for root {self.root}")


class ConfigError(OcflError):
    """Raised when the configuration file cannot be read or validated."""
