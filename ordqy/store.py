from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .errors import KeyNotFound, NotCollectionOrArray, InvalidArgument
from .helpers import normalize_key, lookup_key, pairs_of, renumber

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.search import _SearchOperations
from .extensions.structure import _StructuralOperations

# --- accessors ---
from .extensions.stats import StatsAccessor
from .extensions.sort import SortAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


# --- abstract base class ---

class IStore(ABC):
    @abstractmethod
    def _get_data(self) -> Dict[Key, Any]:
        """get the backing dict"""
        pass


# --- base store implementation ---

class _BaseStore(IStore):
    """
    the key/value engine: an insertion-ordered dict, a synthetic key counter
    and a single external-iteration cursor.

    every rewrite of the whole collection happens in place on the same dict
    object, so a store that aliases a caller's dict never detaches from it.
    """

    ownership: Ownership = Ownership.OWNED

    def __init__(self, data: Any = None):
        self._data: Dict[Key, Any] = {}
        self._next_index = 0
        # cursor: key order snapshot taken at rewind, plus a position into it
        self._cursor_keys: Optional[List[Key]] = None
        self._position = 0
        if data is not None:
            for key, value in pairs_of(data):
                self._put(normalize_key(key), value)
            if isinstance(data, _BaseStore):
                self._next_index = max(self._next_index, data._next_index)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> 'Store':
        """build an owned store from (key, value) pairs; a None key takes the next synthetic key"""
        result = Store()
        for key, value in pairs:
            result._put(None if key is None else normalize_key(key), value)
        return result

    def _get_data(self) -> Dict[Key, Any]:
        return self._data

    @property
    def data(self) -> Dict[Key, Any]:
        """the live backing dict. writes to it are writes to the store."""
        return self._data

    @property
    def is_aliased(self) -> bool:
        return self.ownership is Ownership.ALIASED

    # --- synthetic keys ---

    def _track(self, key: Key) -> None:
        if isinstance(key, int) and key >= self._next_index:
            self._next_index = key + 1

    def _sync_counter(self) -> None:
        int_keys = [k for k in self._data if isinstance(k, int)]
        self._next_index = max(max(int_keys) + 1, 0) if int_keys else 0

    def _next_key(self) -> int:
        if self._next_index in self._data:
            # someone wrote to the backing dict behind our back
            logger.debug(f"synthetic key {self._next_index} already taken, resyncing counter")
            self._sync_counter()
        return self._next_index

    def _put(self, key: Optional[Key], value: Any) -> Key:
        if key is None:
            key = self._next_key()
        self._data[key] = value
        self._track(key)
        return key

    def _replace_entries(self, pairs: Iterable[Pair]) -> None:
        """swap the whole content for new entries, reusing the same dict object"""
        entries = list(pairs)
        self._data.clear()
        self._next_index = 0
        for key, value in entries:
            self._data[key] = value
            self._track(key)
        self._cursor_keys = None
        self._position = 0

    # --- key/value contract ---

    def insert(self, key: Optional[Key], value: Any) -> 'Store':
        """upsert. an existing key keeps its position; a None key appends with a synthetic key."""
        self._put(None if key is None else normalize_key(key), value)
        return self

    def get(self, key: Key) -> Any:
        """strict read, raises KeyNotFound"""
        try:
            return self._data[lookup_key(key)]
        except (KeyError, TypeError):
            raise KeyNotFound(key) from None

    def get_if_exists(self, key: Key, fallback: Any = None) -> Any:
        return self.get(key) if self.key_exists(key) else fallback

    def key_exists(self, key: Key) -> bool:
        try:
            return lookup_key(key) in self._data
        except TypeError:
            return False

    def remove(self, key: Key) -> 'Store':
        """delete a key; a missing key is a no-op"""
        if self.key_exists(key):
            del self._data[lookup_key(key)]
        return self

    def pull(self, key: Key) -> Any:
        """delete a key and return its value, None when it was absent"""
        if not self.key_exists(key):
            return None
        return self._data.pop(lookup_key(key))

    def push(self, value: Any) -> 'Store':
        self._put(None, value)
        return self

    def push_on_top(self, value: Any) -> 'Store':
        """prepend. integer keys are re-indexed from 0, string keys survive."""
        self._replace_entries(renumber([(0, value)] + list(self._data.items())))
        return self

    def unshift(self, value: Any) -> 'Store':
        return self.push_on_top(value)

    def pop(self) -> Any:
        """remove and return the last value, None on an empty store"""
        if not self._data:
            return None
        key, value = self._data.popitem()
        if isinstance(key, int) and key == self._next_index - 1:
            self._next_index -= 1
        return value

    def shift(self) -> Any:
        """remove and return the first value, None on an empty store. integer keys are re-indexed."""
        if not self._data:
            return None
        first_key = next(iter(self._data))
        value = self._data.pop(first_key)
        self._replace_entries(renumber(self._data.items()))
        return value

    def count(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def clear(self) -> 'Store':
        self._data.clear()
        self._next_index = 0
        self._cursor_keys = None
        self._position = 0
        return self

    @staticmethod
    def unwrap(subject: Any) -> Union[Dict[Key, Any], List[Any]]:
        """
        the mutable data behind a store, dict or list.
        for a store this is the live backing dict, not a copy.
        """
        if isinstance(subject, (dict, list)):
            return subject
        if isinstance(subject, _BaseStore):
            return subject._data
        raise NotCollectionOrArray("can only unwrap stores, dicts and lists")

    # --- cursor ---

    def _ensure_cursor(self) -> None:
        if self._cursor_keys is None:
            self.rewind()

    def _skip_removed(self) -> None:
        keys = self._cursor_keys
        while self._position < len(keys) and keys[self._position] not in self._data:
            self._position += 1

    def rewind(self) -> None:
        """move the cursor to the first entry"""
        self._cursor_keys = list(self._data)
        self._position = 0
        self._skip_removed()

    def valid(self) -> bool:
        """whether the cursor points at an entry. decided by position, never by the value."""
        self._ensure_cursor()
        self._skip_removed()
        return self._position < len(self._cursor_keys)

    def key(self) -> Optional[Key]:
        return self._cursor_keys[self._position] if self.valid() else None

    def current(self) -> Any:
        return self._data[self._cursor_keys[self._position]] if self.valid() else None

    def next(self) -> None:
        self._ensure_cursor()
        if self._position < len(self._cursor_keys):
            self._position += 1
        self._skip_removed()

    # --- python protocols ---

    def __iter__(self) -> Iterator[Pair]:
        """yields (key, value) pairs by driving the store's cursor; each new iteration rewinds it"""
        self.rewind()
        while self.valid():
            yield self.key(), self.current()
            self.next()

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, key: Key) -> Any:
        return self.get(key)

    def __setitem__(self, key: Optional[Key], value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Key) -> None:
        self.remove(key)

    def __contains__(self, key: Key) -> bool:
        return self.key_exists(key)

    def __eq__(self, other) -> bool:
        if isinstance(other, _BaseStore):
            return list(self._data.items()) == list(other._data.items())
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


# --- main store class ---

class Store(
    _BaseStore,
    _CoreOperations,
    _SearchOperations,
    _StructuralOperations
):
    """an ordered, mixed int/str keyed collection with a linq-flavoured operation library."""

    def __init__(self, data: Any = None):
        super().__init__(data)
        # --- initialize accessors ---
        self.stats = StatsAccessor(self)
        self.sort = SortAccessor(self)
        self.to = TerminalAccessor(self)


# --- aliasing store ---

class AliasedStore(Store):
    """
    a store that is a live view over a caller-owned dict.
    the caller and the store see each other's writes immediately.
    """

    ownership = Ownership.ALIASED

    def __init__(self, data: Dict[Key, Any]):
        if not isinstance(data, dict):
            raise InvalidArgument(f"only a dict can be aliased, got {type(data).__name__}")
        super().__init__()
        self._data = data
        self._sync_counter()
        logger.debug(f"store aliased onto dict {id(data):#x} with {len(data)} entries")
