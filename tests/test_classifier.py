"""Tests for ContextClassifier."""

from __future__ import annotations

import logging

from swapkeys.core.classifier import ContextClassifier
from swapkeys.core.symbols import CommandSymbol, ModeSymbol
from swapkeys.platform.memory_host import InMemoryEditorHost


def _classifier(**host_kwargs) -> ContextClassifier:
    return ContextClassifier(InMemoryEditorHost(**host_kwargs))


def test_normal_mode_is_not_text():
    assert not _classifier(mode=ModeSymbol.NORMAL).is_text_input()


def test_text_entry_modes_are_text():
    for mode in (ModeSymbol.INSERT, ModeSymbol.REPLACE, ModeSymbol.EMACS):
        assert _classifier(mode=mode).is_text_input()


def test_motion_target_signal_alone_is_enough():
    assert _classifier(mode=ModeSymbol.OPERATOR, motion_target=True).is_text_input()


def test_literal_char_commands_are_text():
    for cmd in (CommandSymbol.FIND_CHAR, CommandSymbol.REPLACE_CHAR, CommandSymbol.SNIPE_T_BACKWARD):
        assert _classifier(mode=ModeSymbol.NORMAL, command=cmd).is_text_input()


def test_other_mode_and_command_never_match_by_default():
    c = _classifier(mode=ModeSymbol.OTHER, command=CommandSymbol.OTHER)
    assert not c.is_text_input()


def test_custom_allow_lists():
    host = InMemoryEditorHost(mode=ModeSymbol.VISUAL)
    c = ContextClassifier(host, text_input_modes=[ModeSymbol.VISUAL], text_input_commands=[])
    assert c.is_text_input()
    host.mode = ModeSymbol.INSERT
    assert not c.is_text_input()
    host.command = CommandSymbol.FIND_CHAR
    assert not c.is_text_input()


def test_verdict_follows_host_state():
    host = InMemoryEditorHost(mode=ModeSymbol.NORMAL)
    c = ContextClassifier(host)
    assert not c.is_text_input()
    host.command = CommandSymbol.FIND_CHAR
    assert c.is_text_input()
    host.command = CommandSymbol.OTHER
    assert not c.is_text_input()


def test_debug_logs_every_signal(caplog):
    host = InMemoryEditorHost(mode=ModeSymbol.NORMAL, command=CommandSymbol.FIND_CHAR)
    c = ContextClassifier(host, debug=True)
    with caplog.at_level(logging.DEBUG, logger="swapkeys.core.classifier"):
        assert c.is_text_input()
    assert "Classified text" in caplog.text
    assert "FIND_CHAR" in caplog.text
