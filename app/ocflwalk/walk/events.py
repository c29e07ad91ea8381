"""Diagnostic events emitted during a walk.

A walk reports what it is doing as WalkEvent records passed to an
optional observer. Nothing is emitted unless an observer is installed.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkEvent:
    """A single diagnostic event.

    Attributes:
        level: Logging level of the event (e.g., logging.DEBUG).
        name: Event name (e.g., "object.enter").
        fields: Structured event data.
    """

    level: int
    name: str
    fields: dict[str, object] = field(default_factory=dict)

    def format(self) -> str:
        """Render the event as ``name key=value ...``."""
        parts = [self.name, *(f"{k}={v}" for k, v in self.fields.items())]
        return " ".join(parts)


WalkObserver = Callable[[WalkEvent], None]


def logging_observer(event: WalkEvent) -> None:
    """Forward a walk event to the module logger at the event's level."""
    logger.log(event.level, "%s", event.format())

