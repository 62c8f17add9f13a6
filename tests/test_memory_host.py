"""Tests for the in-process host implementations."""

from __future__ import annotations

import pytest

from swapkeys.core.symbols import CommandSymbol, ModeSymbol
from swapkeys.platform.memory_host import InMemoryEditorHost, InMemoryTranslationRegistry


def test_dispatch_without_callback_returns_key():
    assert InMemoryTranslationRegistry().dispatch("x") == "x"


def test_register_overwrites():
    reg = InMemoryTranslationRegistry()
    reg.register("a", lambda k: "b")
    reg.register("a", lambda k: "c")
    assert reg.dispatch("a") == "c"
    assert reg.keys == {"a"}


def test_dispatch_is_not_recursive():
    reg = InMemoryTranslationRegistry()
    reg.register("a", lambda k: "b")
    reg.register("b", lambda k: "c")
    assert reg.dispatch("a") == "b"


def test_unregister():
    reg = InMemoryTranslationRegistry()
    reg.register("a", lambda k: "b")
    reg.unregister("a")
    reg.unregister("never")
    assert not reg.is_registered("a")
    assert reg.dispatch("a") == "a"


@pytest.mark.parametrize("bad", ["", "<f1>", None])
def test_register_rejects_malformed_keys(bad):
    with pytest.raises(ValueError):
        InMemoryTranslationRegistry().register(bad, lambda k: k)


def test_editor_host_defaults():
    host = InMemoryEditorHost()
    assert host.current_mode() == ModeSymbol.NORMAL
    assert host.current_command() == CommandSymbol.OTHER
    assert host.reading_motion_target() is False
    assert host.current_buffer() is None
