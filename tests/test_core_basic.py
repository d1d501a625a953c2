"""Tests for basic OrderedMap operations."""

import logging

import pytest

from orderedmap import (
    ABSENT,
    DuplicateKeyError,
    EmptyCollectionError,
    KeyNotFoundError,
    OrderedMap,
    OrderedMapError,
)


@pytest.fixture
def abc() -> OrderedMap[str, int]:
    """Map holding A=1, B=2, C=3 in that order."""
    m = OrderedMap[str, int]()
    m.set("A", 1)
    m.set("B", 2)
    m.set("C", 3)
    return m


def test_map_creation() -> None:
    """Test creating an empty map."""
    m = OrderedMap[str, int]()
    assert m.length() == 0
    assert len(m) == 0
    assert m.pairs() == []


def test_creation_from_pairs() -> None:
    """Test seeding a map from pairs keeps their order."""
    m = OrderedMap([("x", 1), ("y", 2), ("x", 3)])
    assert m.pairs() == [("x", 3), ("y", 2)]
    assert OrderedMap.from_pairs([("a", 1)]).pairs() == [("a", 1)]


def test_set_and_get(abc: OrderedMap[str, int]) -> None:
    """Test basic set and get operations."""
    assert abc.get("A") == 1
    assert abc.get("C") == 3
    assert abc.length() == 3


def test_get_missing_returns_absent() -> None:
    """Test a missing key yields the absence marker, not an error."""
    m = OrderedMap[str, int]()
    assert m.get("nope") is ABSENT
    assert m.get("nope", 42) == 42


def test_stored_none_is_not_absent() -> None:
    """Test None is a storable value distinct from absence."""
    m = OrderedMap[str, None]()
    m.set("k", None)
    assert m.get("k") is None
    assert m.contains("k")
    assert m.length() == 1


def test_replace_keeps_position(abc: OrderedMap[str, int]) -> None:
    """Test replacing a value does not move the key."""
    abc.set("B", 20)
    assert abc.pairs() == [("A", 1), ("B", 20), ("C", 3)]
    assert abc.index(2) == ("B", 20)
    assert abc.length() == 3


def test_set_absent_removes(abc: OrderedMap[str, int]) -> None:
    """Test setting ABSENT on a present key removes it."""
    abc.set("B", ABSENT)
    assert abc.pairs() == [("A", 1), ("C", 3)]
    assert abc.get("B") is ABSENT
    assert "B" not in abc


def test_set_absent_on_missing_key_is_noop(abc: OrderedMap[str, int]) -> None:
    """Test setting ABSENT on a missing key changes nothing."""
    before = abc.pairs()
    abc.set("Z", ABSENT)
    assert abc.pairs() == before
    assert abc.length() == 3


def test_reinsert_after_removal_goes_last(abc: OrderedMap[str, int]) -> None:
    """Test a removed key comes back at the end."""
    abc.set("A", ABSENT)
    abc.set("A", 10)
    assert abc.keys() == ["B", "C", "A"]


def test_remove(abc: OrderedMap[str, int]) -> None:
    """Test remove returns the value and unlinks the key."""
    assert abc.remove("B") == 2
    assert abc.keys() == ["A", "C"]

    with pytest.raises(KeyNotFoundError, match="'B'"):
        abc.remove("B")


def test_pop_front(abc: OrderedMap[str, int]) -> None:
    """Test popping from the front."""
    assert abc.pop_front() == ("A", 1)
    assert abc.length() == 2
    assert list(abc.iterate()) == [("B", 2), ("C", 3)]


def test_pop_back(abc: OrderedMap[str, int]) -> None:
    """Test popping from the back."""
    assert abc.pop_back() == ("C", 3)
    assert abc.pop_back() == ("B", 2)
    assert abc.pop_back() == ("A", 1)
    assert abc.length() == 0


def test_pop_empty() -> None:
    """Test popping an empty map fails loudly."""
    m = OrderedMap[str, int]()
    with pytest.raises(EmptyCollectionError):
        m.pop_front()
    with pytest.raises(EmptyCollectionError):
        m.pop_back()


def test_error_hierarchy() -> None:
    """Test errors also match the builtin exceptions they stand for."""
    m = OrderedMap[str, int]()
    with pytest.raises(IndexError):
        m.pop_front()
    with pytest.raises(KeyError):
        m.move_to_back("missing")
    with pytest.raises(OrderedMapError):
        m.index(1)


def test_iterate_forward_and_reverse(abc: OrderedMap[str, int]) -> None:
    """Test traversal in both directions."""
    assert list(abc.iterate()) == [("A", 1), ("B", 2), ("C", 3)]
    assert list(abc.iterate(reverse=True)) == [("C", 3), ("B", 2), ("A", 1)]
    assert list(abc) == list(abc.iterate())
    assert list(reversed(abc)) == list(abc.iterate(True))


def test_iterate_is_lazy(abc: OrderedMap[str, int]) -> None:
    """Test iterate returns a fresh generator each call."""
    it = abc.iterate()
    assert next(it) == ("A", 1)
    assert next(abc.iterate()) == ("A", 1)
    assert next(it) == ("B", 2)


def test_keys_values_pairs(abc: OrderedMap[str, int]) -> None:
    """Test eager materialization helpers."""
    assert abc.keys() == ["A", "B", "C"]
    assert abc.values() == [1, 2, 3]
    assert abc.pairs() == [("A", 1), ("B", 2), ("C", 3)]


def test_clear(abc: OrderedMap[str, int]) -> None:
    """Test clear resets to the empty state."""
    abc.clear()
    assert abc.length() == 0
    assert abc.pairs() == []
    assert abc.get("A") is ABSENT

    abc.set("D", 4)
    assert abc.pairs() == [("D", 4)]


def test_contains(abc: OrderedMap[str, int]) -> None:
    """Test membership checks."""
    assert abc.contains("A")
    assert "B" in abc
    assert not abc.contains("Z")


def test_duplicate_insert_is_rejected(abc: OrderedMap[str, int]) -> None:
    """Test the internal insert refuses an existing key."""
    with pytest.raises(DuplicateKeyError):
        abc._insert("A", 100)
    assert abc.pairs() == [("A", 1), ("B", 2), ("C", 3)]


def test_equality_and_repr(abc: OrderedMap[str, int]) -> None:
    """Test equality is order-sensitive and repr shows pairs."""
    same = OrderedMap([("A", 1), ("B", 2), ("C", 3)])
    shuffled = OrderedMap([("B", 2), ("A", 1), ("C", 3)])
    assert abc == same
    assert abc != shuffled
    assert repr(abc) == "OrderedMap([('A', 1), ('B', 2), ('C', 3)])"


def test_bulk_operations_log_at_debug(
    abc: OrderedMap[str, int], caplog: pytest.LogCaptureFixture
) -> None:
    """Test clear, sort and clone emit debug records."""
    with caplog.at_level(logging.DEBUG, logger="orderedmap.core"):
        abc.clone()
        abc.sort(lambda a, b: a[0] < b[0])
        abc.clear()

    messages = [record.getMessage() for record in caplog.records]
    assert "Cloning OrderedMap with 3 entries" in messages
    assert "Sorting OrderedMap with 3 entries" in messages
    assert "Clearing OrderedMap with 3 entries" in messages
