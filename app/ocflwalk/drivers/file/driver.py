"""Filesystem driver for OCFL storage roots."""

import logging
from pathlib import Path

from ocflwalk.core.errors import InvalidLocationError, ObjectNotFoundError, RootNotFoundError
from ocflwalk.core.paths import absolute_path
from ocflwalk.drivers.base import Driver, Options
from ocflwalk.drivers.file.locate import find_object, is_physical, locate_coordinates, locate_path
from ocflwalk.drivers.file.session import StagingSession
from ocflwalk.layout.probe import is_root, root_ref
from ocflwalk.models.entity import EntityRef, EntityType, Select
from ocflwalk.walk.events import WalkObserver
from ocflwalk.walk.scope import EntityCallback, Scope

logger = logging.getLogger(__name__)


class FileDriver(Driver):
    """Driver for OCFL storage roots on a local filesystem.

    Args:
        root: Storage root used for logical locations and for walks
            without a location. Physical locations work without it.
        observer: Optional receiver of diagnostic walk events.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        observer: WalkObserver | None = None,
    ) -> None:
        self._root_path = absolute_path(root) if root is not None else None
        self._root: EntityRef | None = None
        self._observer = observer

    @property
    def root(self) -> EntityRef:
        """Reference of the configured storage root.

        Raises:
            InvalidLocationError: If the driver has no root.
            RootNotFoundError: If the configured path is not a storage root.
        """
        if self._root is None:
            if self._root_path is None:
                msg = "No storage root configured for logical locations"
                raise InvalidLocationError(msg)
            if not is_root(self._root_path, EntityType.ROOT)[0]:
                raise RootNotFoundError(self._root_path)
            self._root = root_ref(self._root_path)
        return self._root

    def resolve(self, *location: str) -> EntityRef:
        """Resolve a walk location into an entity reference.

        A single location naming an existing path is resolved
        physically; anything else is taken as logical coordinates.
        """
        if not location:
            return self.root
        if len(location) == 1 and is_physical(location[0]):
            return locate_path(location[0])
        return locate_coordinates(self.root, tuple(location), self._observer)

    def walk(self, select: Select, callback: EntityCallback, *location: str) -> None:
        """Walk every entity matching ``select`` under a location.

        Raises:
            OcflError: If the location cannot be resolved or the walk fails.
        """
        start = self.resolve(*location)
        logger.debug("Walking %s entities from %s", select.type.label, start.coords() or start.addr)
        Scope(start, select.type, head=select.head, observer=self._observer).walk(callback)

    def open(self, object_id: str, options: Options | None = None) -> StagingSession:
        """Open a staging session on an object.

        Raises:
            ObjectNotFoundError: If the object does not exist and
                ``options.create`` is False.
        """
        options = options or Options()
        try:
            obj: EntityRef | None = find_object(self.root, object_id, self._observer)
        except ObjectNotFoundError:
            if not options.create:
                raise
            obj = None
        return StagingSession(object_id, options, obj)
