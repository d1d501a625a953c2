"""Exception classes for orderedmap."""


class OrderedMapError(Exception):
    """Base exception for all orderedmap errors."""


class EmptyCollectionError(OrderedMapError, IndexError):
    """Raised when popping from an empty map."""


class KeyNotFoundError(OrderedMapError, KeyError):
    """Raised when removing or repositioning a key that is not in the map."""


class IndexOutOfRangeError(OrderedMapError, IndexError):
    """Raised when a positional index is zero or beyond the map's length."""


class DuplicateKeyError(OrderedMapError):
    """Raised when an insert is attempted for a key that is already linked."""
