"""Utility modules for ocflwalk.

This module exports commonly used utility functions.
"""

from ocflwalk.utils.formatting import (
    console,
    create_entity_table,
    entity_to_dict,
    err_console,
    format_coords,
    format_entity_row,
    print_error,
    print_info,
)

__all__ = [
    "console",
    "create_entity_table",
    "entity_to_dict",
    "err_console",
    "format_coords",
    "format_entity_row",
    "print_error",
    "print_info",
]
