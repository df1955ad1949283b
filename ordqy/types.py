from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Union[int, str]
Pair = Tuple[Key, Any]

# callbacks receive (value, key, store), trimmed to the arity they declare
Predicate = Callable[..., bool]
Mapper = Callable[..., Any]
Projection = Callable[..., Any]
Reducer = Callable[..., Any]
Comparer = Callable[[Any, Any], int]


class Ownership(Enum):
    """who holds the backing dict of a store"""
    OWNED = 'owned'
    ALIASED = 'aliased'


class SortFlag(Enum):
    """equality policy used by unique() and unique_by_key()"""
    REGULAR = 'regular'
    NUMERIC = 'numeric'
    STRING = 'string'


class Lookup(Generic[T]):
    """
    outcome of a search. carries the matching key and value, or nothing.
    a stored None, False or 0 is still a hit, so always test the lookup
    itself (or .found) rather than the value.
    """
    __slots__ = ('found', 'key', 'value')

    def __init__(self, found: bool, key: Optional[Key] = None, value: Optional[T] = None):
        self.found = found
        self.key = key
        self.value = value

    @classmethod
    def hit(cls, key: Key, value: T) -> 'Lookup[T]':
        return cls(True, key, value)

    @classmethod
    def miss(cls) -> 'Lookup[T]':
        return cls(False)

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> T:
        """the found value, raising KeyNotFound for a miss"""
        if not self.found:
            from .errors import KeyNotFound
            raise KeyNotFound(None)
        return self.value

    def value_or(self, default: T) -> T:
        return self.value if self.found else default

    def __eq__(self, other) -> bool:
        if not isinstance(other, Lookup):
            return NotImplemented
        return (self.found, self.key, self.value) == (other.found, other.key, other.value)

    def __repr__(self) -> str:
        if not self.found:
            return "Lookup(found=False)"
        return f"Lookup(key={self.key!r}, value={self.value!r})"
