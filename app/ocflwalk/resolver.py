"""Resolver context for OCFL entities.

A resolver binds a storage root to the first configured driver able
to resolve it, and routes walks and sessions through that driver.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ocflwalk.core.errors import NoSuitableDriverError, OcflError
from ocflwalk.drivers.base import Driver, Options, Session
from ocflwalk.models.entity import EntityRef, EntityType, Select
from ocflwalk.walk.scope import EntityCallback

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResolverConfig:
    """Configuration of a resolver context.

    Attributes:
        root: Storage root location.
        drivers: Drivers to try, in order.
    """

    root: str | Path | None
    drivers: list[Driver] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Resolver:
    """A storage root bound to the driver that resolved it.

    Attributes:
        root: Reference of the storage root.
        driver: Driver used for walks and sessions.
        config: Configuration the resolver was created from.
    """

    root: EntityRef
    driver: Driver
    config: ResolverConfig

    def walk(self, select: Select, callback: EntityCallback, *location: str) -> None:
        """Walk entities through the bound driver."""
        self.driver.walk(select, callback, *location)

    def open(self, object_id: str, options: Options | None = None) -> Session:
        """Open a session through the bound driver."""
        return self.driver.open(object_id, options)


def init_resolver(config: ResolverConfig) -> Resolver:
    """Establish a resolver context.

    Each driver is asked in turn to walk the storage root at
    ``config.root``; the first one that succeeds is bound.

    Args:
        config: Resolver configuration.

    Returns:
        Resolver bound to the storage root.

    Raises:
        NoSuitableDriverError: If no root is configured or no driver
            can resolve it.
    """
    if config.root:
        for driver in config.drivers:
            found: list[EntityRef] = []
            try:
                driver.walk(Select(EntityType.ROOT), found.append, str(config.root))
            except OcflError as e:
                logger.debug(
                    "Driver %s cannot resolve %s: %s", type(driver).__name__, config.root, e
                )
                continue
            if found:
                return Resolver(root=found[0], driver=driver, config=config)

    raise NoSuitableDriverError(config.root)
