"""Type definitions for orderedmap."""

from typing import Callable, Final, TypeAlias, TypeVar

# Generic type variables for keys and values
K = TypeVar("K")  # Key type
V = TypeVar("V")  # Value type


class _AbsentType:
    """Marker for "no value", distinct from any storable value including None."""

    __slots__ = ()
    _instance: "_AbsentType | None" = None

    def __new__(cls) -> "_AbsentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _AbsentType()

# Returns True when the first (key, value) pair should sort before the second
Comparator: TypeAlias = Callable[[tuple[K, V], tuple[K, V]], bool]
