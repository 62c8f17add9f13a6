"""Interfaces to the host editor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Callable, Optional

from swapkeys.core.symbols import CommandSymbol, ModeSymbol

TranslationCallback = Callable[[str], str]


class IKeyTranslationRegistry(ABC):
    """Global table of per-key callbacks consulted before key dispatch."""

    @abstractmethod
    def register(self, key: str, callback: TranslationCallback) -> None:
        """Install *callback* for *key*, replacing any previous one."""

    @abstractmethod
    def unregister(self, key: str) -> None: ...


class IEditorHost(ABC):
    @abstractmethod
    def current_mode(self) -> ModeSymbol: ...

    @abstractmethod
    def current_command(self) -> CommandSymbol: ...

    @abstractmethod
    def reading_motion_target(self) -> bool:
        """True while the next keystroke is a motion's target, not a count."""

    @abstractmethod
    def current_buffer(self) -> Optional[Hashable]:
        """Identifier of the buffer receiving input, or None outside any buffer."""
