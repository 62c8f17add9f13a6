"""Tests for build_mapping_table() and ExtraMappings."""

from __future__ import annotations

import pytest

from swapkeys.core.mapping_table import ExtraMappings, Mapping, build_mapping_table, check_key
from swapkeys.core.maps import NUMBER_ROW_PAIRS


def test_builtin_pairs_are_bidirectional():
    table = build_mapping_table(True, NUMBER_ROW_PAIRS, [])
    assert len(table) == 20
    for a, b in NUMBER_ROW_PAIRS:
        assert table[a] == b
        assert table[b] == a


def test_disabled_flag_skips_builtin_pairs():
    table = build_mapping_table(False, NUMBER_ROW_PAIRS, [Mapping("_", "-")])
    assert table == {"_": "-"}


def test_extra_mapping_is_one_way():
    table = build_mapping_table(False, NUMBER_ROW_PAIRS, [Mapping("a", "b")])
    assert table["a"] == "b"
    assert "b" not in table


def test_later_entry_overwrites_earlier():
    extras = [Mapping("1", "x"), Mapping("x", "y"), Mapping("x", "z")]
    table = build_mapping_table(True, NUMBER_ROW_PAIRS, extras)
    # extra mappings win over the built-in table
    assert table["1"] == "x"
    assert table["!"] == "1"
    assert table["x"] == "z"


def test_custom_builtin_pairs():
    table = build_mapping_table(True, [("1", "+")], [])
    assert table == {"1": "+", "+": "1"}


class TestExtraMappings:
    def test_add_appends_in_order(self):
        extras = ExtraMappings()
        assert extras.add("a", "b") is True
        assert extras.add("c", "d") is True
        assert extras.as_list() == [Mapping("a", "b"), Mapping("c", "d")]

    def test_duplicate_add_is_noop(self):
        extras = ExtraMappings()
        extras.add("a", "b")
        assert extras.add("a", "b") is False
        assert len(extras) == 1

    def test_same_source_different_target_is_kept(self):
        extras = ExtraMappings()
        extras.add("a", "b")
        assert extras.add("a", "c") is True
        assert len(extras) == 2
        assert Mapping("a", "c") in extras

    def test_invalid_key_rejected_before_append(self):
        extras = ExtraMappings()
        with pytest.raises(ValueError):
            extras.add("ab", "c")
        with pytest.raises(ValueError):
            extras.add("a", "")
        assert len(extras) == 0

    def test_iteration_is_a_snapshot(self):
        extras = ExtraMappings([Mapping("a", "b")])
        for _ in extras:
            extras.add("c", "d")
        assert len(extras) == 2


@pytest.mark.parametrize("bad", ["", "ab", None, 1])
def test_check_key_rejects(bad):
    with pytest.raises(ValueError):
        check_key(bad)


def test_mapping_is_frozen():
    m = Mapping("a", "b")
    with pytest.raises(AttributeError):
        m.from_key = "c"  # type: ignore[misc]
