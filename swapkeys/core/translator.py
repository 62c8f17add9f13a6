"""Translator — per-keystroke substitution decision."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import swapkeys.log  # registers TRACE level and logger.trace()

if TYPE_CHECKING:
    from swapkeys.core.buffer_state import EditorBufferState
    from swapkeys.core.classifier import ContextClassifier

logger = logging.getLogger(__name__)


class Translator:
    """Returns the substituted key, or the key unchanged.

    Runs on every keystroke the host routes through a registered callback,
    including keystrokes in buffers where the mode was never enabled, so a
    missing state simply means "no mapping".
    """

    def __init__(self, classifier: "ContextClassifier"):
        self.classifier = classifier

    def translate(self, key: str, state: "Optional[EditorBufferState]") -> str:
        if state is None or not state.mode_enabled or not state.mappings:
            return key
        if not self.classifier.is_text_input():
            logger.trace("translate %r: not text input, pass through", key)  # type: ignore[attr-defined]
            return key
        result = state.mappings.get(key, key)
        logger.trace("translate %r -> %r (buffer %r)", key, result, state.buffer_id)  # type: ignore[attr-defined]
        return result
