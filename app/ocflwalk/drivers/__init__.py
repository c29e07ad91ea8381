"""OCFL drivers.

This module exports the driver interfaces and the filesystem driver.
"""

from ocflwalk.drivers.base import Driver, Opener, Options, Session, SessionUser, Walker
from ocflwalk.drivers.file import FileDriver, StagingSession

__all__ = [
    "Driver",
    "FileDriver",
    "Opener",
    "Options",
    "Session",
    "SessionUser",
    "StagingSession",
    "Walker",
]
