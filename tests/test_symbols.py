"""Tests for ModeSymbol / CommandSymbol parsing."""

from __future__ import annotations

from swapkeys.core.symbols import (
    DEFAULT_TEXT_INPUT_COMMANDS,
    DEFAULT_TEXT_INPUT_MODES,
    CommandSymbol,
    ModeSymbol,
)


def test_mode_parse_is_case_insensitive():
    assert ModeSymbol.parse("Insert") == ModeSymbol.INSERT
    assert ModeSymbol.parse(" replace ") == ModeSymbol.REPLACE


def test_unknown_names_map_to_other():
    assert ModeSymbol.parse("some-third-party-state") == ModeSymbol.OTHER
    assert CommandSymbol.parse("forward-word") == CommandSymbol.OTHER
    assert ModeSymbol.parse(None) == ModeSymbol.OTHER  # type: ignore[arg-type]


def test_command_parse_is_case_sensitive():
    assert CommandSymbol.parse("snipe-f") == CommandSymbol.SNIPE_F
    assert CommandSymbol.parse("snipe-F") == CommandSymbol.SNIPE_F_BACKWARD


def test_defaults_exclude_other():
    assert ModeSymbol.OTHER not in DEFAULT_TEXT_INPUT_MODES
    assert CommandSymbol.OTHER not in DEFAULT_TEXT_INPUT_COMMANDS
    assert CommandSymbol.SELF_INSERT not in DEFAULT_TEXT_INPUT_COMMANDS
