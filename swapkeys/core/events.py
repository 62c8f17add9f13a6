"""Typed event definitions (dataclasses)."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    # Buffer lifecycle
    MODE_ENABLED = auto()
    MODE_DISABLED = auto()
    # Mapping table
    MAPPINGS_REBUILT = auto()
    MAPPING_ADDED = auto()
    # Config
    CONFIG_CHANGED = auto()
    GLOBAL_MODE_CHANGED = auto()


@dataclass
class Event:
    type: EventType
    data: Any
    timestamp: float


@dataclass
class RebuildEventData:
    buffer_id: Hashable
    size: int            # number of entries in the new active set
    swap_number_row: bool


@dataclass
class MappingEventData:
    from_key: str
    to_key: str
