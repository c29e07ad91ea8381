"""Data models for ocflwalk.

This module exports the entity types and references shared by the
walk engine, drivers and CLI.
"""

from ocflwalk.models.entity import EntityRef, EntityType, Select

__all__ = ["EntityRef", "EntityType", "Select"]
