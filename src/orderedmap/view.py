"""Subscript-style view over an OrderedMap."""

from collections.abc import Iterator
from typing import Any, Generic

from orderedmap.core import OrderedMap
from orderedmap.types import ABSENT, K, V


class OrderedMapView(Generic[K, V]):
    """
    Container-syntax view backed by an OrderedMap.

    Supports ``view[key]``, ``view[key] = value``, ``del view[key]``,
    ``len(view)``, ``key in view`` and iteration over (key, value) pairs.
    Reordering, popping, positional access, sorting, cloning and clearing
    are reached through unwrap().
    """

    __slots__ = ("_map",)

    def __init__(self, ordered_map: OrderedMap[K, V] | None = None) -> None:
        self._map: OrderedMap[K, V] = ordered_map if ordered_map is not None else OrderedMap()

    def unwrap(self) -> OrderedMap[K, V]:
        """Return the backing map itself, not a copy."""
        return self._map

    def __getitem__(self, key: K) -> Any:
        # Missing keys read as ABSENT, same as OrderedMap.get
        return self._map.get(key)

    def __setitem__(self, key: K, value: Any) -> None:
        # Assigning ABSENT unsets the key
        self._map.set(key, value)

    def __delitem__(self, key: K) -> None:
        self._map.set(key, ABSENT)

    def __len__(self) -> int:
        return self._map.length()

    def __contains__(self, key: object) -> bool:
        return self._map.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return self._map.iterate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map.pairs()!r})"
