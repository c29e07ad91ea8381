"""Pydantic models for OCFL object inventories.

This module defines the subset of the ``inventory.json`` structure that
is needed to address versions and files of an object. Parsing is
lenient: unknown keys are ignored and no schema or fixity validation
is performed.
"""

import logging
from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ocflwalk.core.errors import VersionNotFoundError

logger = logging.getLogger(__name__)


class VersionUser(BaseModel):
    """Agent that created a version.

    Attributes:
        name: Name of the user.
        address: Optional contact address (URI).
    """

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str, Field(description="User name")] = ""
    address: Annotated[str | None, Field(description="User address")] = None


class VersionMetadata(BaseModel):
    """Metadata recorded for one version of an object.

    Attributes:
        created: Creation timestamp, as recorded (ISO 8601 string).
        message: Optional commit message.
        user: Optional user that created the version.
        state: Mapping of content digest to the logical paths holding it.
    """

    model_config = ConfigDict(extra="ignore")

    created: Annotated[str | None, Field(description="Creation timestamp")] = None
    message: Annotated[str | None, Field(description="Version message")] = None
    user: Annotated[VersionUser | None, Field(description="Creating user")] = None
    state: Annotated[
        dict[str, list[str]],
        Field(default_factory=dict, description="Digest to logical paths"),
    ]


@dataclass(frozen=True, slots=True)
class InventoryFile:
    """A logical file of a version and the content path backing it.

    Attributes:
        logical_path: User-facing path, relative to the version.
        physical_path: Content path, relative to the object root.
    """

    logical_path: str
    physical_path: str


class Inventory(BaseModel):
    """Parsed OCFL object inventory.

    Attributes:
        id: Object identifier.
        type: Inventory type URI.
        digest_algorithm: Digest algorithm used for the manifest.
        head: Identifier of the most recent version.
        content_directory: Name of the content directory in each version.
        manifest: Mapping of content digest to physical content paths.
        versions: Mapping of version id to version metadata. Iteration
            order carries no meaning.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Annotated[str, Field(description="Object identifier")]
    type: Annotated[str, Field(description="Inventory type URI")] = ""
    digest_algorithm: Annotated[
        str, Field(alias="digestAlgorithm", description="Manifest digest algorithm")
    ] = "sha512"
    head: Annotated[str, Field(description="Head version id")] = ""
    content_directory: Annotated[
        str, Field(alias="contentDirectory", description="Content directory name")
    ] = "content"
    manifest: Annotated[
        dict[str, list[str]],
        Field(default_factory=dict, description="Digest to content paths"),
    ]
    versions: Annotated[
        dict[str, VersionMetadata],
        Field(default_factory=dict, description="Version id to metadata"),
    ]

    def version(self, version_id: str) -> VersionMetadata:
        """Get the metadata of a single version.

        Args:
            version_id: Version identifier (e.g., "v1").

        Returns:
            The version's metadata.

        Raises:
            VersionNotFoundError: If the version does not exist.
        """
        try:
            return self.versions[version_id]
        except KeyError:
            raise VersionNotFoundError(version_id, self.id) from None

    def files_in(self, version_id: str) -> list[InventoryFile]:
        """List the files of a version.

        Each logical path in the version state is paired with the first
        content path the manifest records for its digest. The order of
        the returned list is not meaningful.

        Args:
            version_id: Version identifier.

        Returns:
            List of InventoryFile entries.

        Raises:
            VersionNotFoundError: If the version does not exist.
        """
        state = self.version(version_id).state
        files: list[InventoryFile] = []
        for digest, logical_paths in state.items():
            content_paths = self.manifest.get(digest)
            if not content_paths:
                logger.warning(
                    "Digest %s of %s/%s has no manifest entry", digest, self.id, version_id
                )
                physical = ""
            else:
                physical = content_paths[0]
            files.extend(
                InventoryFile(logical_path=lp, physical_path=physical) for lp in logical_paths
            )
        return files

    def physical_to_logical(self, version_id: str, physical_path: str) -> str | None:
        """Map a content path to its logical path within a version.

        Args:
            version_id: Version identifier.
            physical_path: Content path relative to the object root.

        Returns:
            The first logical path backed by that content path, or None.
        """
        for item in self.files_in(version_id):
            if item.physical_path == physical_path:
                return item.logical_path
        return None
