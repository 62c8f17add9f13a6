"""In-process host implementations.

Used by the test-suite and by embedders that drive SwapKeys from their own
event loop instead of a full editor.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Optional

import swapkeys.log  # registers TRACE level and logger.trace()
from swapkeys.core.mapping_table import check_key
from swapkeys.core.symbols import CommandSymbol, ModeSymbol
from swapkeys.platform.host import IEditorHost, IKeyTranslationRegistry, TranslationCallback

logger = logging.getLogger(__name__)


class InMemoryTranslationRegistry(IKeyTranslationRegistry):
    """Dict-backed translation table with a one-shot dispatcher."""

    def __init__(self) -> None:
        self._callbacks: dict[str, TranslationCallback] = {}

    def register(self, key: str, callback: TranslationCallback) -> None:
        check_key(key)
        self._callbacks[key] = callback

    def unregister(self, key: str) -> None:
        self._callbacks.pop(key, None)

    def is_registered(self, key: str) -> bool:
        return key in self._callbacks

    @property
    def keys(self) -> set[str]:
        return set(self._callbacks)

    def dispatch(self, key: str) -> str:
        """Run the callback for *key* once; its result is final for this cycle."""
        callback = self._callbacks.get(key)
        if callback is None:
            return key
        result = callback(key)
        logger.trace("dispatch %r -> %r", key, result)  # type: ignore[attr-defined]
        return result


class InMemoryEditorHost(IEditorHost):
    """Mutable stand-in for the editor's mode/command/buffer queries."""

    def __init__(
        self,
        mode: ModeSymbol = ModeSymbol.NORMAL,
        command: CommandSymbol = CommandSymbol.OTHER,
        motion_target: bool = False,
        buffer: Optional[Hashable] = None,
    ):
        self.mode = mode
        self.command = command
        self.motion_target = motion_target
        self.buffer = buffer

    def current_mode(self) -> ModeSymbol:
        return self.mode

    def current_command(self) -> CommandSymbol:
        return self.command

    def reading_motion_target(self) -> bool:
        return self.motion_target

    def current_buffer(self) -> Optional[Hashable]:
        return self.buffer
