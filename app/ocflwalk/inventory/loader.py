"""Inventory file I/O.

This module loads an object's ``inventory.json`` and validates it into
an Inventory model.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from ocflwalk.core.errors import ManifestLoadError
from ocflwalk.inventory.models import Inventory

INVENTORY_FILENAME = "inventory.json"


def inventory_path(object_path: str | Path) -> Path:
    """Get the inventory file path of an object root."""
    return Path(object_path) / INVENTORY_FILENAME


def load_inventory(object_path: str | Path) -> Inventory:
    """Load and parse the inventory of an OCFL object.

    Args:
        object_path: Path to the object root directory.

    Returns:
        Parsed Inventory.

    Raises:
        ManifestLoadError: If the inventory is missing, is not valid JSON,
            or lacks the fields needed to address versions and files.
    """
    path = inventory_path(object_path)

    try:
        with open(path, "rb") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestLoadError(object_path, f"{INVENTORY_FILENAME} not found") from e
    except json.JSONDecodeError as e:
        raise ManifestLoadError(object_path, f"invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ManifestLoadError(object_path, f"invalid encoding: {e}") from e
    except OSError as e:
        raise ManifestLoadError(object_path, str(e)) from e

    try:
        return Inventory.model_validate(data)
    except ValidationError as e:
        raise ManifestLoadError(object_path, f"invalid inventory content: {e}") from e
