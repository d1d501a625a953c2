"""Intrusive circular doubly-linked list with a single sentinel root."""

from collections.abc import Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Node(Generic[K, V]):
    """A node in the circular list, holding one key's position and value."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: Node[K, V] | None = None
        self.next: Node[K, V] | None = None


class CircularList(Generic[K, V]):
    """
    Circular doubly-linked list anchored by one sentinel root node.

    ``root.next`` is the first node and ``root.prev`` the last. An empty list
    has the root linked to itself, so no operation needs a null check at
    either end.
    """

    def __init__(self) -> None:
        self._root: Node[K, V] = Node(None, None)  # type: ignore[arg-type]
        self.reset()

    @property
    def root(self) -> Node[K, V]:
        """The sentinel node. Never carries a key."""
        return self._root

    @property
    def first(self) -> Node[K, V] | None:
        """First node, or None if the list is empty."""
        node = self._root.next
        return None if node is self._root else node

    @property
    def last(self) -> Node[K, V] | None:
        """Last node, or None if the list is empty."""
        node = self._root.prev
        return None if node is self._root else node

    def insert_after(self, anchor: Node[K, V], node: Node[K, V]) -> None:
        """Link node immediately after anchor. O(1)."""
        node.prev = anchor
        node.next = anchor.next
        if anchor.next is not None:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def append(self, node: Node[K, V]) -> None:
        """Append node to the end of the list (before root). O(1)."""
        if self._root.prev is not None:
            self.insert_after(self._root.prev, node)

    def appendleft(self, node: Node[K, V]) -> None:
        """Prepend node to the beginning of the list (after root). O(1)."""
        self.insert_after(self._root, node)

    def remove(self, node: Node[K, V]) -> None:
        """Remove a node from the list. O(1)."""
        if node is self._root:
            raise ValueError("Cannot remove the root sentinel")
        if node.prev is None or node.next is None:
            raise ValueError("Cannot remove a node that is not linked")
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def popleft(self) -> Node[K, V] | None:
        """Remove and return the first node. O(1)."""
        node = self.first
        if node is not None:
            self.remove(node)
        return node

    def pop(self) -> Node[K, V] | None:
        """Remove and return the last node. O(1)."""
        node = self.last
        if node is not None:
            self.remove(node)
        return node

    def walk(self, steps: int, *, reverse: bool = False) -> Node[K, V]:
        """
        Return the node ``steps`` hops away from root. O(steps).

        Callers must keep ``1 <= steps <= len(self)``; the walk does not
        bounds-check.
        """
        node = self._root
        for _ in range(steps):
            node = node.prev if reverse else node.next  # type: ignore[assignment]
        return node

    def iter_nodes(self, *, reverse: bool = False) -> Iterator[Node[K, V]]:
        """
        Lazily yield nodes from root until root is reached again.

        Each step reads the live links, so mutating the list mid-iteration
        gives undefined results.
        """
        node = self._root.prev if reverse else self._root.next
        while node is not self._root and node is not None:
            following = node.prev if reverse else node.next
            yield node
            node = following

    def reset(self) -> None:
        """Drop every node by relinking the root to itself. O(1)."""
        self._root.next = self._root
        self._root.prev = self._root
        self._size = 0

    def __iter__(self) -> Iterator[Node[K, V]]:
        return self.iter_nodes()

    def __len__(self) -> int:
        """Return the number of nodes in the list, excluding root."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
