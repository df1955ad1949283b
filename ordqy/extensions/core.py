from __future__ import annotations
import typing
from ..types import *
from ..errors import InvalidArgument
from ..helpers import adapt, normalize_key, pairs_of, renumber
from ..config import get_settings

if typing.TYPE_CHECKING:
    from ..store import Store


class _CoreOperations(Generic[T]):
    def map(self: 'Store', mapping: Mapper) -> 'Store':
        """rewrite every value in place, keeping keys and order"""
        fn = adapt(mapping)
        for key, value in list(self._data.items()):
            self._data[key] = fn(value, key, self)
        return self

    def filter(self: 'Store', condition: Predicate) -> 'Store':
        """drop the entries the condition rejects, in place"""
        fn = adapt(condition)
        for key, value in list(self._data.items()):
            if not fn(value, key, self):
                del self._data[key]
        return self

    def copy(self: 'Store') -> 'Store':
        """an owned copy, independent of later writes to this store"""
        from ..store import Store
        return Store(self)

    def concat(self: 'Store', other: Any, overwrite_keys: bool = True) -> 'Store':
        """
        insert every entry of a dict, list or store key by key.
        lists are keyed by position, so they overwrite 0..n-1 unless overwrite_keys is off.
        """
        for key, value in pairs_of(other):
            if not overwrite_keys and self.key_exists(key):
                continue
            self.insert(key, value)
        return self

    def reverse(self: 'Store') -> 'Store':
        """reverse the order. integer keys are re-indexed, string keys are kept."""
        self._replace_entries(renumber(reversed(list(self._data.items()))))
        return self

    def flip(self: 'Store') -> 'Store':
        """values become keys and keys become values. later duplicates win."""
        flipped = []
        for key, value in self._data.items():
            try:
                flipped.append((normalize_key(value), key))
            except InvalidArgument:
                raise InvalidArgument(f"can only flip int and str values, got {value!r}") from None
        self._replace_entries(flipped)
        return self

    def first(self: 'Store') -> Any:
        """first value, None when empty. does not touch the cursor."""
        return next(iter(self._data.values()), None)

    def last(self: 'Store') -> Any:
        """last value, None when empty. does not touch the cursor."""
        return next(reversed(self._data.values()), None)

    def join(self: 'Store', separator: Optional[str] = None) -> str:
        sep = get_settings().join_separator if separator is None else separator
        return sep.join(str(value) for value in self._data.values())

    def get_keys(self: 'Store') -> 'Store':
        """the keys as a new store keyed 0..n-1"""
        from ..store import Store
        return Store(list(self._data.keys()))

    def get_values(self: 'Store') -> 'Store':
        """the values as a new store keyed 0..n-1"""
        from ..store import Store
        return Store(list(self._data.values()))

    def with_nth(self: 'Store', step: int, closure: Callable[..., Any]) -> 'Store':
        """call closure(value, key, position) for every step-th entry"""
        if step < 1:
            raise InvalidArgument(f"step must be positive, got {step}")
        fn = adapt(closure)
        for position, (key, item) in enumerate(list(self._data.items())):
            if position % step == 0:
                fn(item, key, position)
        return self

    def nth(self: 'Store', step: int, keep_keys: bool = False) -> 'Store':
        """every step-th entry in a new store"""
        from ..store import Store
        result = Store()

        def collect(item, key):
            if keep_keys:
                result.insert(key, item)
            else:
                result.push(item)

        self.with_nth(step, collect)
        return result

    def slice(self: 'Store', limit: Optional[int] = None, offset: Optional[int] = None) -> 'Store':
        """
        a selection of entries as a new store, the source stays intact.
        a negative offset counts from the end, a negative limit stops that many entries before the end.
        integer keys are re-indexed.
        """
        from ..store import Store
        items = list(self._data.items())
        size = len(items)
        start = offset or 0
        if start < 0:
            start = max(size + start, 0)
        if limit is None:
            stop = size
        elif limit < 0:
            stop = size + limit
        else:
            stop = start + limit
        return Store.from_pairs(renumber(items[start:stop]))

    def extract(self: 'Store', keys: Iterable[Key]) -> 'Store':
        """
        move the requested keys into a new store, removing them here.
        a requested key that does not exist shows up in the result as None.
        """
        from ..store import Store
        result = Store()
        for key in keys:
            result.insert(key, self.pull(key))
        return result

    def only(self: 'Store', keys: Iterable[Key]) -> 'Store':
        """a new store holding just the requested keys that exist; the source is untouched"""
        from ..store import Store
        result = Store()
        for key in keys:
            if self.key_exists(key):
                result.insert(key, self.get(key))
        return result
