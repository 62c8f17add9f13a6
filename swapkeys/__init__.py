"""SwapKeys — swap keys such as digits and their shifted symbols while typing text."""

from swapkeys.__version__ import __version__
from swapkeys.app import SwapKeysApp
from swapkeys.core.symbols import CommandSymbol, ModeSymbol

__all__ = ["__version__", "SwapKeysApp", "CommandSymbol", "ModeSymbol"]
