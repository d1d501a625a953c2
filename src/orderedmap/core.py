"""Main OrderedMap implementation."""

import copy
import functools
import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Generic

from orderedmap.errors import (
    DuplicateKeyError,
    EmptyCollectionError,
    IndexOutOfRangeError,
    KeyNotFoundError,
)
from orderedmap.linkedlist import CircularList, Node
from orderedmap.types import ABSENT, Comparator, K, V

if TYPE_CHECKING:
    from orderedmap.view import OrderedMapView

logger = logging.getLogger(__name__)


class OrderedMap(Generic[K, V]):
    """
    Associative container that remembers the order keys were inserted in.

    Combines a dict for O(1) keyed access with a circular doubly-linked list
    for ordered traversal. Each key owns exactly one list node, which also
    carries the key's value, so the index and the list can never disagree
    about what is stored.

    Not thread-safe. Mutating the map while iterating over it gives
    undefined traversal results; iterate over ``pairs()`` if you need to
    mutate as you go.
    """

    def __init__(self, pairs: Iterable[tuple[K, V]] | None = None) -> None:
        """
        Initialize the map.

        Args:
            pairs: Optional (key, value) pairs to seed the map with, applied
                through set() in order. Later duplicates replace the value of
                earlier ones without moving them.
        """
        self._index: dict[K, Node[K, V]] = {}
        self._list = CircularList[K, V]()
        if pairs is not None:
            for key, value in pairs:
                self.set(key, value)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[K, V]]) -> "OrderedMap[K, V]":
        """Build a map from (key, value) pairs, keeping their order."""
        return cls(pairs)

    # Lookup

    def get(self, key: K, default: Any = ABSENT) -> Any:
        """
        Return the value stored for key, or ``default`` if key is not set.

        A missing key is not an error. The default is the ABSENT marker so a
        stored None stays distinguishable from "not set". O(1).
        """
        node = self._index.get(key)
        return node.value if node is not None else default

    def contains(self, key: K) -> bool:
        """Return True if key is set. O(1)."""
        return key in self._index

    def length(self) -> int:
        """Return the number of entries. O(1)."""
        return len(self._list)

    # Mutation

    def set(self, key: K, value: Any) -> None:
        """
        Set, replace or unset key.

        - key present, value ABSENT: the key is removed
        - key present, value given: the value is replaced in place and the
          key keeps its position
        - key missing, value given: the key is appended at the end
        - key missing, value ABSENT: nothing happens

        All branches are O(1).
        """
        node = self._index.get(key)
        if node is None:
            if value is ABSENT:
                return
            self._insert(key, value)
        elif value is ABSENT:
            self._unlink(node)
        else:
            node.value = value

    def remove(self, key: K) -> V:
        """
        Remove key and return its value.

        Raises:
            KeyNotFoundError: If key is not set
        """
        node = self._require(key)
        self._unlink(node)
        return node.value

    def pop_front(self) -> tuple[K, V]:
        """
        Remove and return the first (key, value) pair. O(1).

        Raises:
            EmptyCollectionError: If the map is empty
        """
        node = self._list.first
        if node is None:
            raise EmptyCollectionError("pop_front() on an empty OrderedMap")
        self._unlink(node)
        return (node.key, node.value)

    def pop_back(self) -> tuple[K, V]:
        """
        Remove and return the last (key, value) pair. O(1).

        Raises:
            EmptyCollectionError: If the map is empty
        """
        node = self._list.last
        if node is None:
            raise EmptyCollectionError("pop_back() on an empty OrderedMap")
        self._unlink(node)
        return (node.key, node.value)

    def move_to_front(self, key: K) -> None:
        """
        Reposition key to be first, keeping its value. O(1).

        Raises:
            KeyNotFoundError: If key is not set
        """
        node = self._require(key)
        self._unlink(node)
        self._insert(key, node.value, front=True)

    def move_to_back(self, key: K) -> None:
        """
        Reposition key to be last, keeping its value. O(1).

        Raises:
            KeyNotFoundError: If key is not set
        """
        node = self._require(key)
        self._unlink(node)
        self._insert(key, node.value)

    def clear(self) -> None:
        """Remove every entry. Clones taken earlier are unaffected."""
        logger.debug("Clearing OrderedMap with %d entries", len(self._list))
        self._list.reset()
        self._index = {}

    def sort(self, comparator: Comparator[K, V]) -> None:
        """
        Reorder entries by a comparator over (key, value) pairs.

        ``comparator(a, b)`` returns True when ``a`` should come before ``b``.
        Ties are left to the comparator; pairs it considers equal end up in an
        unspecified relative order. A comparator that is not a total order
        still terminates and leaves a valid map, in some order.
        O(n log n).
        """

        def _compare(a: tuple[K, V], b: tuple[K, V]) -> int:
            if comparator(a, b):
                return -1
            if comparator(b, a):
                return 1
            return 0

        ordered = sorted(self.pairs(), key=functools.cmp_to_key(_compare))
        logger.debug("Sorting OrderedMap with %d entries", len(ordered))
        self.clear()
        for key, value in ordered:
            self.set(key, value)

    # Positional access and traversal

    def index(self, position: int) -> tuple[K, V]:
        """
        Return the (key, value) pair at a 1-based position.

        Negative positions count from the end, so -1 is the last entry.
        This walks the list and is O(n); use it sparingly.

        Raises:
            IndexOutOfRangeError: If position is 0 or abs(position) > length
            TypeError: If position is not an int
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(
                f"OrderedMap index must be an int, not {type(position).__name__}"
            )
        size = len(self._list)
        if position == 0 or abs(position) > size:
            raise IndexOutOfRangeError(
                f"Index {position} out of range for OrderedMap of length {size}"
            )
        node = self._list.walk(abs(position), reverse=position < 0)
        return (node.key, node.value)

    def iterate(self, reverse: bool = False) -> Iterator[tuple[K, V]]:
        """
        Lazily yield (key, value) pairs in insertion order, or reversed.

        Each call starts a fresh traversal. Do not mutate the map until the
        iterator is exhausted.
        """
        for node in self._list.iter_nodes(reverse=reverse):
            yield (node.key, node.value)

    def keys(self) -> list[K]:
        """Return all keys in order."""
        return [key for key, _ in self.iterate()]

    def values(self) -> list[V]:
        """Return all values in order."""
        return [value for _, value in self.iterate()]

    def pairs(self) -> list[tuple[K, V]]:
        """Return all (key, value) pairs in order."""
        return list(self.iterate())

    # Copying

    def clone(self) -> "OrderedMap[K, V]":
        """
        Return an independent map with the same pairs in the same order.

        The new map shares no structure with this one. Values themselves are
        shared by reference; use copy.deepcopy() to copy them too. O(n).
        """
        logger.debug("Cloning OrderedMap with %d entries", len(self._list))
        return type(self)(self.iterate())

    def view(self) -> "OrderedMapView[K, V]":
        """Return a subscript-style view backed by this map."""
        from orderedmap.view import OrderedMapView

        return OrderedMapView(self)

    def __copy__(self) -> "OrderedMap[K, V]":
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> "OrderedMap[K, V]":
        result = type(self)()
        memo[id(self)] = result
        for key, value in self.iterate():
            result.set(copy.deepcopy(key, memo), copy.deepcopy(value, memo))
        return result

    # Internal helpers

    def _require(self, key: K) -> Node[K, V]:
        node = self._index.get(key)
        if node is None:
            raise KeyNotFoundError(f"Key {key!r} not found in OrderedMap")
        return node

    def _insert(self, key: K, value: V, *, front: bool = False) -> None:
        if key in self._index:
            raise DuplicateKeyError(f"Key {key!r} is already linked")
        node = Node(key, value)
        if front:
            self._list.appendleft(node)
        else:
            self._list.append(node)
        self._index[key] = node

    def _unlink(self, node: Node[K, V]) -> None:
        self._list.remove(node)
        del self._index[node.key]

    # Python protocol

    def __len__(self) -> int:
        return len(self._list)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return self.iterate()

    def __reversed__(self) -> Iterator[tuple[K, V]]:
        return self.iterate(reverse=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self.pairs() == other.pairs()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pairs()!r})"
