"""Editing-mode and command symbols reported by the host editor.

Both enumerations are closed: anything the host reports that SwapKeys does
not know about maps to ``OTHER``, which never appears in a default
allow-list.
"""

from __future__ import annotations

from enum import Enum


class ModeSymbol(Enum):
    NORMAL = "normal"
    INSERT = "insert"
    REPLACE = "replace"
    VISUAL = "visual"
    OPERATOR = "operator"
    MOTION = "motion"
    EMACS = "emacs"        # raw pass-through state
    OTHER = "other"

    @classmethod
    def parse(cls, name: str) -> "ModeSymbol":
        """Return the member named *name* (case-insensitive), else ``OTHER``."""
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            return cls.OTHER


class CommandSymbol(Enum):
    FIND_CHAR = "find-char"
    FIND_CHAR_BACKWARD = "find-char-backward"
    FIND_CHAR_TO = "find-char-to"
    FIND_CHAR_TO_BACKWARD = "find-char-to-backward"
    REPLACE_CHAR = "replace-char"
    SNIPE_F = "snipe-f"
    SNIPE_F_BACKWARD = "snipe-F"
    SNIPE_T = "snipe-t"
    SNIPE_T_BACKWARD = "snipe-T"
    SNIPE_S = "snipe-s"
    SNIPE_S_BACKWARD = "snipe-S"
    SNIPE_X = "snipe-x"
    SNIPE_X_BACKWARD = "snipe-X"
    SELF_INSERT = "self-insert"
    OTHER = "other"

    @classmethod
    def parse(cls, name: str) -> "CommandSymbol":
        """Return the member whose value is *name*, else ``OTHER``.

        Case matters here: ``snipe-f`` and ``snipe-F`` are different
        commands.
        """
        try:
            return cls(name.strip())
        except (AttributeError, ValueError):
            return cls.OTHER


DEFAULT_TEXT_INPUT_MODES: frozenset[ModeSymbol] = frozenset({
    ModeSymbol.INSERT,
    ModeSymbol.REPLACE,
    ModeSymbol.EMACS,
})

# Commands that read one literal character as their argument.
DEFAULT_TEXT_INPUT_COMMANDS: frozenset[CommandSymbol] = frozenset({
    CommandSymbol.FIND_CHAR,
    CommandSymbol.FIND_CHAR_BACKWARD,
    CommandSymbol.FIND_CHAR_TO,
    CommandSymbol.FIND_CHAR_TO_BACKWARD,
    CommandSymbol.REPLACE_CHAR,
    CommandSymbol.SNIPE_F,
    CommandSymbol.SNIPE_F_BACKWARD,
    CommandSymbol.SNIPE_T,
    CommandSymbol.SNIPE_T_BACKWARD,
    CommandSymbol.SNIPE_S,
    CommandSymbol.SNIPE_S_BACKWARD,
    CommandSymbol.SNIPE_X,
    CommandSymbol.SNIPE_X_BACKWARD,
})
