"""Mapping table builder and the process-wide extra mappings list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from swapkeys.core.maps import CharacterPair


def check_key(key: object, what: str = "key") -> str:
    """Return *key* when it is a single-character string, else raise ``ValueError``."""
    if not isinstance(key, str) or len(key) != 1:
        raise ValueError(f"Invalid {what}: {key!r} (must be a single character)")
    return key


@dataclass(frozen=True)
class Mapping:
    from_key: str
    to_key: str

    def __post_init__(self) -> None:
        check_key(self.from_key, "from_key")
        check_key(self.to_key, "to_key")


class ExtraMappings:
    """Append-only, ordered list of user-added one-way mappings.

    Adding a mapping that is already present (same source and target)
    leaves the list untouched.
    """

    def __init__(self, mappings: Iterable[Mapping] = ()):
        self._mappings: list[Mapping] = []
        for m in mappings:
            self.add(m.from_key, m.to_key)

    def add(self, from_key: str, to_key: str) -> bool:
        """Append ``from_key -> to_key``. Returns True if the list changed."""
        mapping = Mapping(from_key, to_key)
        if mapping in self._mappings:
            return False
        self._mappings.append(mapping)
        return True

    def as_list(self) -> list[Mapping]:
        return list(self._mappings)

    def __iter__(self) -> Iterator[Mapping]:
        return iter(list(self._mappings))

    def __len__(self) -> int:
        return len(self._mappings)

    def __contains__(self, item: object) -> bool:
        return item in self._mappings


def build_mapping_table(
    enabled_flag: bool,
    builtin_pairs: Iterable[CharacterPair],
    extra_mappings: Iterable[Mapping],
) -> dict[str, str]:
    """Compute an active mapping set.

    Built-in pairs go in first (both directions, only when *enabled_flag*),
    then every extra mapping in insertion order. A later entry for the same
    source key replaces the earlier one.
    """
    table: dict[str, str] = {}
    if enabled_flag:
        for a, b in builtin_pairs:
            table[a] = b
            table[b] = a
    for m in extra_mappings:
        table[m.from_key] = m.to_key
    return table
