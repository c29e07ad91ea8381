"""Local filesystem driver.

This module exports the FileDriver and its staging session.
"""

from ocflwalk.drivers.file.driver import FileDriver
from ocflwalk.drivers.file.session import StagingSession, validate_logical_path

__all__ = ["FileDriver", "StagingSession", "validate_logical_path"]
