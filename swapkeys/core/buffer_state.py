"""Per-buffer state passed explicitly into every translation."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field


@dataclass
class EditorBufferState:
    buffer_id: Hashable

    # Minor mode active in this buffer
    mode_enabled: bool = False

    # Buffer-local override of the built-in number-row table
    swap_number_row: bool = True

    # Active mapping set: from-key -> to-key
    mappings: dict[str, str] = field(default_factory=dict)

    def clear(self) -> None:
        """Empty the active set and mark the mode inactive."""
        self.mappings = {}
        self.mode_enabled = False
