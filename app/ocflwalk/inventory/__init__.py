"""OCFL inventory access.

This module provides the inventory models and the loader used by the
walk engine to descend into objects.
"""

from ocflwalk.inventory.loader import INVENTORY_FILENAME, inventory_path, load_inventory
from ocflwalk.inventory.models import Inventory, InventoryFile, VersionMetadata, VersionUser

__all__ = [
    "INVENTORY_FILENAME",
    "Inventory",
    "InventoryFile",
    "VersionMetadata",
    "VersionUser",
    "inventory_path",
    "load_inventory",
]
