"""Abstract driver interfaces.

A driver provides OCFL access through some backend. It walks bounded
scopes of entities (Walker) and opens sessions on single objects
(Opener).
"""

from abc import ABC, abstractmethod
from typing import Annotated, BinaryIO

from pydantic import BaseModel, ConfigDict, Field

from ocflwalk.models.entity import Select
from ocflwalk.walk.scope import EntityCallback


class SessionUser(BaseModel):
    """User recorded on versions written through a session."""

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(description="User name")] = ""
    address: Annotated[str | None, Field(description="User address (URI)")] = None


class Options(BaseModel):
    """Options for opening a session on an OCFL object.

    Attributes:
        create: If True, a session is opened even if the object does not
            exist yet.
        digest_algorithms: Fixity digest algorithms for new content.
        user: User to record on new versions.
    """

    model_config = ConfigDict(extra="forbid")

    create: Annotated[bool, Field(description="Create the object if missing")] = False
    digest_algorithms: Annotated[
        list[str],
        Field(default_factory=lambda: ["sha512"], description="Fixity digest algorithms"),
    ]
    user: Annotated[
        SessionUser,
        Field(default_factory=SessionUser, description="User for new versions"),
    ]


class Session(ABC):
    """Read/write access to a single OCFL object.

    Each session is bound to a single object version: either an
    existing one, or an uncommitted new one.
    """

    @abstractmethod
    def put(self, logical_path: str, reader: BinaryIO) -> None:
        """Put content at the given logical path.

        Args:
            logical_path: Version-relative logical path.
            reader: Binary stream with the content.
        """


class Walker(ABC):
    """Walks a bounded scope of OCFL entities underneath a location.

    The location is either a single physical address (a file path),
    or a sequence of logical ids ``object_id, version_id, logical_path``
    where each id requires the ones before it. Without a location the
    walk covers everything under the storage root.

    Example:
        >>> driver.walk(Select(EntityType.FILE), print, "obj-A", "v2")
    """

    @abstractmethod
    def walk(self, select: Select, callback: EntityCallback, *location: str) -> None:
        """Invoke ``callback`` for every entity matching ``select``.

        Raises:
            OcflError: If the location cannot be resolved or the walk fails.
        """


class Opener(ABC):
    """Opens sessions on OCFL objects."""

    @abstractmethod
    def open(self, object_id: str, options: Options | None = None) -> Session:
        """Open a session on the object with the given id."""


class Driver(Walker, Opener):
    """Basic OCFL access through some backend."""
