import pytest

from swapkeys.app import SwapKeysApp
from swapkeys.core.symbols import CommandSymbol, ModeSymbol
from swapkeys.platform.memory_host import InMemoryEditorHost, InMemoryTranslationRegistry


@pytest.fixture
def host():
    return InMemoryEditorHost(buffer="main")


@pytest.fixture
def registry():
    return InMemoryTranslationRegistry()


@pytest.fixture
def app(registry, host):
    return SwapKeysApp(registry, host)


@pytest.fixture
def insert_mode(host):
    """Put the host into insert mode (text-entry context)."""
    host.mode = ModeSymbol.INSERT
    host.command = CommandSymbol.SELF_INSERT
    host.motion_target = False
    return host


@pytest.fixture
def normal_mode(host):
    host.mode = ModeSymbol.NORMAL
    host.command = CommandSymbol.OTHER
    host.motion_target = False
    return host
