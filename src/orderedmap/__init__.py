"""orderedmap - Insertion-ordered map with O(1) keyed access and ordered traversal."""

from orderedmap.core import OrderedMap
from orderedmap.errors import (
    DuplicateKeyError,
    EmptyCollectionError,
    IndexOutOfRangeError,
    KeyNotFoundError,
    OrderedMapError,
)
from orderedmap.types import ABSENT, Comparator
from orderedmap.view import OrderedMapView

__version__ = "0.1.0"

__all__ = [
    "OrderedMap",
    "OrderedMapView",
    "ABSENT",
    "Comparator",
    "OrderedMapError",
    "EmptyCollectionError",
    "KeyNotFoundError",
    "IndexOutOfRangeError",
    "DuplicateKeyError",
]
