"""ContextClassifier — is the current keystroke text or a command argument?"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from swapkeys.core.symbols import (
    DEFAULT_TEXT_INPUT_COMMANDS,
    DEFAULT_TEXT_INPUT_MODES,
    CommandSymbol,
    ModeSymbol,
)

if TYPE_CHECKING:
    from swapkeys.platform.host import IEditorHost

logger = logging.getLogger(__name__)


class ContextClassifier:
    """Classifies keystrokes as text input using three host signals.

    Any one signal is enough:
      1. the host is reading a motion's target character
         (tells a find-char target apart from a count prefix),
      2. the current mode is a text-entry mode,
      3. the running command reads a literal character.
    """

    def __init__(
        self,
        host: "IEditorHost",
        text_input_modes: Iterable[ModeSymbol] = DEFAULT_TEXT_INPUT_MODES,
        text_input_commands: Iterable[CommandSymbol] = DEFAULT_TEXT_INPUT_COMMANDS,
        debug: bool = False,
    ):
        self.host = host
        self.text_input_modes = frozenset(text_input_modes)
        self.text_input_commands = frozenset(text_input_commands)
        self.debug = debug

    def is_text_input(self) -> bool:
        if not self.debug:
            return (
                self.host.reading_motion_target()
                or self.host.current_mode() in self.text_input_modes
                or self.host.current_command() in self.text_input_commands
            )

        # Evaluate every signal so the log shows the whole picture.
        motion = self.host.reading_motion_target()
        mode = self.host.current_mode()
        command = self.host.current_command()
        verdict = motion or mode in self.text_input_modes or command in self.text_input_commands
        logger.debug(
            "Classified %s: motion_target=%s mode=%s command=%s",
            "text" if verdict else "command", motion, mode, command,
        )
        return verdict
