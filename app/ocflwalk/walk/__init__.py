"""Walk engine for OCFL entities.

This module exports the Scope walk engine and its diagnostic events.
"""

from ocflwalk.walk.events import WalkEvent, WalkObserver, logging_observer
from ocflwalk.walk.scope import EntityCallback, Scope

__all__ = [
    "EntityCallback",
    "Scope",
    "WalkEvent",
    "WalkObserver",
    "logging_observer",
]
