"""Configuration loader and validator for SwapKeys.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/swapkeys/config.json``.

Also provides ``validate_config(conf)`` which turns the JSON-friendly
values into the types the core works with (tuples of pairs, frozensets
of mode/command symbols), raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile

from swapkeys.core.maps import NUMBER_ROW_PAIRS
from swapkeys.core.symbols import (
    DEFAULT_TEXT_INPUT_COMMANDS,
    DEFAULT_TEXT_INPUT_MODES,
    CommandSymbol,
    ModeSymbol,
)

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/swapkeys/config.json'

# Single source of truth for default configuration (JSON-friendly values)
DEFAULT_CONFIG: dict = {
    'swap_number_row': True,
    'number_row_pairs': [list(p) for p in NUMBER_ROW_PAIRS],
    'text_input_modes': sorted(m.value for m in DEFAULT_TEXT_INPUT_MODES),
    'text_input_commands': sorted(c.value for c in DEFAULT_TEXT_INPUT_COMMANDS),
    'extra_pairs': [],
    'debug': False,
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # Whole-line // comments only
    s = re.sub(r"^[ \t]*//.*$", "", s, flags=re.MULTILINE)
    s = re.sub(r",[ \t\r\n]*(\}|\])", r"\1", s)
    return s


def _parse_pairs(name: str, raw) -> tuple[tuple[str, str], ...]:
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"Invalid '{name}': must be a list of pairs")
    pairs = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"Invalid '{name}' entry {item!r}: must be a pair")
        a, b = item
        for ch in (a, b):
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"Invalid '{name}' entry {item!r}: {ch!r} is not a single character")
        pairs.append((a, b))
    return tuple(pairs)


def _parse_symbols(name: str, raw, enum_cls) -> frozenset:
    if not isinstance(raw, (list, tuple, set, frozenset)):
        raise ValueError(f"Invalid '{name}': must be a list of names")
    out = set()
    for item in raw:
        if isinstance(item, enum_cls):
            out.add(item)
            continue
        try:
            out.add(enum_cls(item))
        except ValueError:
            raise ValueError(f"Invalid '{name}': unknown name {item!r}")
    return frozenset(out)


def _to_json_value(value):
    """Convert a normalized value back into something ``json.dump`` accepts."""
    if isinstance(value, (set, frozenset)):
        return sorted(_to_json_value(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    if isinstance(value, (ModeSymbol, CommandSymbol)):
        return value.value
    return value


def _write_json_atomic(path: str, data: dict) -> None:
    """Write *data* to a temp file next to *path*, then rename over it."""
    dir_path = os.path.dirname(os.path.abspath(path))
    os.makedirs(dir_path, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=dir_path, suffix='.json.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
            json.dump(data, tmp, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a dict with every expected key, values converted to core types.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}
    if not isinstance(conf, dict):
        raise ValueError(f"Invalid config: expected a mapping, got {type(conf).__name__}")
    defaults = DEFAULT_CONFIG
    out: dict = {}

    snr = conf.get('swap_number_row', defaults['swap_number_row'])
    if not isinstance(snr, bool):
        raise ValueError("Invalid 'swap_number_row': must be boolean")
    out['swap_number_row'] = snr

    out['number_row_pairs'] = _parse_pairs(
        'number_row_pairs', conf.get('number_row_pairs', defaults['number_row_pairs']))
    out['extra_pairs'] = _parse_pairs(
        'extra_pairs', conf.get('extra_pairs', defaults['extra_pairs']))

    out['text_input_modes'] = _parse_symbols(
        'text_input_modes', conf.get('text_input_modes', defaults['text_input_modes']), ModeSymbol)
    out['text_input_commands'] = _parse_symbols(
        'text_input_commands', conf.get('text_input_commands', defaults['text_input_commands']),
        CommandSymbol)

    dbg = conf.get('debug', defaults['debug'])
    if not isinstance(dbg, bool):
        raise ValueError("Invalid 'debug' flag: must be boolean")
    out['debug'] = dbg

    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge its keys into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        if debug:
            logger.warning("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            if debug:
                logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        if debug:
            logger.warning("Invalid config %s: top level must be an object", path)
        return False

    try:
        validate_config(cfg)
    except ValueError as verr:
        if debug:
            logger.warning("Invalid config %s: %s", path, verr)
        return False

    for k in cfg:
        if k in DEFAULT_CONFIG:
            target_config[k] = cfg[k]
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration, returning validated values.

    If *config_path* is given, uses only that file (defaults if it does not
    exist). Otherwise falls back to ``~/.config/swapkeys/config.json``.
    """
    raw = json.loads(json.dumps(DEFAULT_CONFIG))
    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(path):
        _read_and_merge(path, raw, debug=debug)
    return validate_config(raw)


# ------------------------------------------------------------------
# ConfigManager
# ------------------------------------------------------------------

class ConfigManager:
    """Centralized configuration management with load/save/validate.

    Stores JSON-friendly values; ``effective()`` returns them validated and
    normalized for the core.
    """

    def __init__(self, config_path: str | None = None, debug: bool = False):
        self._config_path = config_path or os.path.expanduser(USER_CONFIG_PATH)
        self._debug = debug
        self._config: dict = {}
        self._load_config()

    def _load_config(self) -> None:
        """Reset to defaults, then overlay from file (if exists)."""
        self._config = json.loads(json.dumps(DEFAULT_CONFIG))
        if self._config_path and os.path.exists(self._config_path):
            _read_and_merge(self._config_path, self._config, debug=self._debug)

    def reload(self) -> None:
        self._load_config()

    def save(self, target_path: str | None = None) -> None:
        """Atomically save configuration to file. Raises ``OSError`` on failure."""
        save_path = target_path or self._config_path
        _write_json_atomic(save_path, {k: _to_json_value(v) for k, v in self._config.items()})

    def get(self, key: str, default=None):
        return self._config.get(key, default)

    def set(self, key: str, value) -> None:
        self._config[key] = _to_json_value(value)

    def update(self, updates: dict) -> None:
        for k, v in updates.items():
            self.set(k, v)

    def get_all(self) -> dict:
        return dict(self._config)

    def reset_to_defaults(self) -> None:
        self._config = json.loads(json.dumps(DEFAULT_CONFIG))

    def validate(self) -> bool:
        """Return True if the current values pass ``validate_config``."""
        try:
            validate_config(self._config)
            return True
        except ValueError:
            return False

    def effective(self) -> dict:
        """Validated, normalized view of the current values."""
        return validate_config(self._config)

    @property
    def config_path(self) -> str:
        return self._config_path
