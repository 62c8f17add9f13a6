"""SwapKeysApp — wires the core to a host editor and exposes the public API."""

from __future__ import annotations

import logging
import time
from collections.abc import Hashable, Iterable
from typing import Callable, Optional, Union

import swapkeys.log  # registers TRACE level and logger.trace()
from swapkeys.config import ConfigManager, validate_config
from swapkeys.core import maps
from swapkeys.core.buffer_state import EditorBufferState
from swapkeys.core.classifier import ContextClassifier
from swapkeys.core.events import Event, EventType, MappingEventData, RebuildEventData
from swapkeys.core.mapping_table import ExtraMappings, Mapping, build_mapping_table
from swapkeys.core.translator import Translator
from swapkeys.platform.host import IEditorHost, IKeyTranslationRegistry

logger = logging.getLogger(__name__)

ConfigSource = Union[ConfigManager, dict, None]
Listener = Callable[[Event], None]


class SwapKeysApp:
    """Owns per-buffer states and the shared extra mappings.

    One instance per editor process. Host registrations are additive: a
    key, once registered, stays registered for the life of the instance,
    because other buffers may still rely on it.

    Every rebuild computes the new tables and performs the registrations
    they need before any buffer state is touched, so a registry error
    leaves the previous tables active.
    """

    def __init__(
        self,
        registry: IKeyTranslationRegistry,
        host: IEditorHost,
        config: ConfigSource = None,
        debug: bool = False,
    ):
        self.registry = registry
        self.host = host
        self.extra_mappings = ExtraMappings()
        self.global_mode = False

        self._buffers: dict[Hashable, EditorBufferState] = {}
        self._registered: set[str] = set()
        self._listeners: list[tuple[frozenset[EventType], Listener]] = []

        settings = self._settings_from(config)
        self._debug_override = debug
        self.classifier = ContextClassifier(
            host,
            text_input_modes=settings['text_input_modes'],
            text_input_commands=settings['text_input_commands'],
        )
        self.translator = Translator(self.classifier)
        self._apply_settings(settings)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def _settings_from(config: ConfigSource) -> dict:
        if isinstance(config, ConfigManager):
            return config.effective()
        return validate_config(config)

    def _apply_settings(self, settings: dict) -> None:
        self.debug = self._debug_override or settings['debug']
        self.classifier.debug = self.debug
        self.number_row_pairs = settings['number_row_pairs']
        self.default_swap_number_row = settings['swap_number_row']
        self.classifier.text_input_modes = settings['text_input_modes']
        self.classifier.text_input_commands = settings['text_input_commands']
        for a, b in settings['extra_pairs']:
            self.extra_mappings.add(a, b)
            self.extra_mappings.add(b, a)

    def reconfigure(self, config: ConfigSource) -> None:
        """Apply new configuration and rebuild every enabled buffer.

        Buffer-local ``swap_number_row`` overrides survive; only the
        default for buffers created later changes.
        """
        settings = self._settings_from(config)
        previous = (
            self.debug,
            self.number_row_pairs,
            self.default_swap_number_row,
            self.classifier.text_input_modes,
            self.classifier.text_input_commands,
        )
        extra_before = self.extra_mappings.as_list()
        self._apply_settings(settings)
        try:
            self._rebuild_buffers(self._enabled_states())
        except Exception:
            (
                self.debug,
                self.number_row_pairs,
                self.default_swap_number_row,
                self.classifier.text_input_modes,
                self.classifier.text_input_commands,
            ) = previous
            self.extra_mappings = ExtraMappings(extra_before)
            self.classifier.debug = self.debug
            raise
        self._publish(EventType.CONFIG_CHANGED, settings)

    # ------------------------------------------------------------------
    # Buffer state
    # ------------------------------------------------------------------

    def state_for(self, buffer_id: Hashable) -> Optional[EditorBufferState]:
        return self._buffers.get(buffer_id)

    def _ensure_state(self, buffer_id: Hashable) -> EditorBufferState:
        state = self._buffers.get(buffer_id)
        if state is None:
            state = EditorBufferState(buffer_id, swap_number_row=self.default_swap_number_row)
            self._buffers[buffer_id] = state
        return state

    def _enabled_states(self) -> list[EditorBufferState]:
        return [s for s in self._buffers.values() if s.mode_enabled]

    # ------------------------------------------------------------------
    # Rebuild
    # ------------------------------------------------------------------

    def _build_for(self, swap_number_row: bool) -> dict[str, str]:
        return build_mapping_table(swap_number_row, self.number_row_pairs, self.extra_mappings)

    def _register_keys(self, keys: Iterable[str]) -> None:
        for key in keys:
            if key in self._registered:
                continue
            self.registry.register(key, self.translation_callback)
            self._registered.add(key)
            logger.trace("registered translation for %r", key)  # type: ignore[attr-defined]

    def _rebuild_buffers(
        self,
        states: list[EditorBufferState],
        swap_number_row: Optional[bool] = None,
    ) -> None:
        """Recompute tables for *states*, register their keys, then swap them in.

        *swap_number_row*, when given, replaces each state's flag as part of
        the same swap.
        """
        tables = []
        for state in states:
            flag = state.swap_number_row if swap_number_row is None else swap_number_row
            tables.append((state, flag, self._build_for(flag)))

        for _, _, table in tables:
            self._register_keys(table)

        for state, flag, table in tables:
            state.swap_number_row = flag
            state.mappings = table
            if self.debug:
                logger.debug(
                    "Rebuilt buffer %r: %d mappings (number row %s)",
                    state.buffer_id, len(table), "on" if flag else "off",
                )
            self._publish(
                EventType.MAPPINGS_REBUILT,
                RebuildEventData(state.buffer_id, len(table), flag),
            )

    # ------------------------------------------------------------------
    # Host callback
    # ------------------------------------------------------------------

    def translation_callback(self, key: str) -> str:
        """The function registered with the host for every mapped key."""
        state = self._buffers.get(self.host.current_buffer())
        return self.translator.translate(key, state)

    def is_text_input(self) -> bool:
        return self.classifier.is_text_input()

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def on_enable(self, buffer_id: Hashable) -> EditorBufferState:
        """Turn the mode on for *buffer_id* and build its active set."""
        state = self._ensure_state(buffer_id)
        self._rebuild_buffers([state])
        state.mode_enabled = True
        logger.debug("Enabled in buffer %r", buffer_id)
        self._publish(EventType.MODE_ENABLED, buffer_id)
        return state

    def on_disable(self, buffer_id: Hashable) -> None:
        """Empty the active set for *buffer_id*; host registrations stay."""
        state = self._buffers.get(buffer_id)
        if state is None:
            return
        state.clear()
        logger.debug("Disabled in buffer %r", buffer_id)
        self._publish(EventType.MODE_DISABLED, buffer_id)

    def on_buffer_opened(self, buffer_id: Hashable) -> EditorBufferState:
        """Track a new buffer; enables it right away while global mode is on."""
        if self.global_mode:
            return self.on_enable(buffer_id)
        return self._ensure_state(buffer_id)

    def on_buffer_closed(self, buffer_id: Hashable) -> None:
        self._buffers.pop(buffer_id, None)

    def enable_global(self) -> None:
        """Enable the mode in every known buffer and in buffers opened later.

        All buffers are rebuilt in one pass; a registry error leaves global
        mode off and every buffer as it was.
        """
        current = self.host.current_buffer()
        created = current is not None and current not in self._buffers
        if created:
            self._ensure_state(current)
        states = list(self._buffers.values())
        try:
            self._rebuild_buffers(states)
        except Exception:
            if created:
                self._buffers.pop(current, None)
            raise
        for state in states:
            if not state.mode_enabled:
                state.mode_enabled = True
                self._publish(EventType.MODE_ENABLED, state.buffer_id)
        self.global_mode = True
        logger.info("Global mode on (%d buffers)", len(states))
        self._publish(EventType.GLOBAL_MODE_CHANGED, True)

    def disable_global(self) -> None:
        self.global_mode = False
        for buffer_id in list(self._buffers):
            self.on_disable(buffer_id)
        logger.info("Global mode off")
        self._publish(EventType.GLOBAL_MODE_CHANGED, False)

    # ------------------------------------------------------------------
    # Number row
    # ------------------------------------------------------------------

    def set_swap_number_row(self, buffer_id: Hashable, enabled: bool) -> None:
        """Change the buffer-local number-row flag, rebuilding when the mode is on."""
        state = self._ensure_state(buffer_id)
        if state.mode_enabled:
            self._rebuild_buffers([state], swap_number_row=bool(enabled))
        else:
            state.swap_number_row = bool(enabled)

    def swap_number_row(self, buffer_id: Hashable) -> EditorBufferState:
        """Swap the number row in *buffer_id*, enabling the mode there."""
        state = self._ensure_state(buffer_id)
        if state.mode_enabled:
            self.set_swap_number_row(buffer_id, True)
            return state
        state.swap_number_row = True
        return self.on_enable(buffer_id)

    # ------------------------------------------------------------------
    # Public mapping API
    # ------------------------------------------------------------------

    def add_mapping(self, from_key: str, to_key: str) -> None:
        """Translate *from_key* to *to_key* in text input (one direction only)."""
        mapping = Mapping(from_key, to_key)
        if mapping in self.extra_mappings:
            logger.debug("Mapping %r -> %r already present", from_key, to_key)
            return
        # Register first: a rejected key must not end up in the shared list.
        self._register_keys([from_key])
        self.extra_mappings.add(from_key, to_key)
        logger.info("Added mapping %r -> %r", from_key, to_key)
        self._publish(EventType.MAPPING_ADDED, MappingEventData(from_key, to_key))
        self._rebuild_buffers(self._enabled_states())

    def add_pair(self, a: str, b: str) -> None:
        """Swap *a* and *b* with each other."""
        Mapping(a, b)  # validate both keys before adding either
        self.add_mapping(a, b)
        self.add_mapping(b, a)

    def swap_underscore_dash(self) -> None:
        self.add_pair(*maps.UNDERSCORE_DASH)

    def swap_colon_semicolon(self) -> None:
        self.add_pair(*maps.COLON_SEMICOLON)

    def swap_tilde_backtick(self) -> None:
        self.add_pair(*maps.TILDE_BACKTICK)

    def swap_double_single_quotes(self) -> None:
        self.add_pair(*maps.DOUBLE_SINGLE_QUOTES)

    def swap_square_curly_brackets(self) -> None:
        for pair in maps.SQUARE_CURLY_BRACKETS:
            self.add_pair(*pair)

    def swap_pipe_backslash(self) -> None:
        self.add_pair(*maps.PIPE_BACKSLASH)

    def swap_question_mark_slash(self) -> None:
        self.add_pair(*maps.QUESTION_MARK_SLASH)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener, *event_types: EventType) -> None:
        """Call *listener* for events of *event_types* (all events when none given)."""
        self._listeners.append((frozenset(event_types), listener))

    def remove_listener(self, listener: Listener) -> None:
        self._listeners = [(types, l) for types, l in self._listeners if l != listener]

    def _publish(self, event_type: EventType, data) -> None:
        if not self._listeners:
            return
        event = Event(type=event_type, data=data, timestamp=time.time())
        for types, listener in list(self._listeners):
            if types and event_type not in types:
                continue
            try:
                listener(event)
            except Exception:
                logger.exception("Listener error for %s", event_type)
