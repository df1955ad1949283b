from __future__ import annotations
import typing
import logging
from ..types import *
from ..errors import InvalidArgument
from ..helpers import adapt, is_nested, items_of, has_field, field_of, to_number

if typing.TYPE_CHECKING:
    from ..store import Store

logger = logging.getLogger(__name__)


def _merge_level(pairs: List[Pair], depth: int) -> Dict[Key, Any]:
    """
    splice nested values into their parent's position, dissolving up to depth levels.
    string-key collisions overwrite, integer-key collisions get the next free integer key.
    """
    merged: Dict[Key, Any] = {}
    next_index = 0

    def place(key, value):
        nonlocal next_index
        if isinstance(key, int) and key in merged:
            key = next_index
        merged[key] = value
        if isinstance(key, int) and key >= next_index:
            next_index = key + 1

    for key, value in pairs:
        if depth > 0 and is_nested(value):
            for child_key, child_value in _merge_level(items_of(value), depth - 1).items():
                place(child_key, child_value)
        else:
            place(key, value)
    return merged


def _identity_for(flags: Union[SortFlag, str]) -> Callable[[Any], Any]:
    try:
        flag = SortFlag(flags)
    except ValueError:
        raise InvalidArgument(f"unknown sort flag: {flags!r}") from None
    if flag is SortFlag.NUMERIC:
        return lambda value: to_number(value, strict=False)
    if flag is SortFlag.STRING:
        return str
    return lambda value: value


class _StructuralOperations(Generic[T]):
    def flatten(self: 'Store', depth: int = 1) -> 'Store':
        """
        dissolve nested dicts, lists, tuples and stores into this level, in place.
        depth counts the nesting levels to dissolve; depth <= 0 leaves the store alone.
        strings and bytes are never treated as nested.
        """
        if depth <= 0:
            return self
        merged = _merge_level(list(self._data.items()), depth)
        logger.debug(f"flatten(depth={depth}): {len(self._data)} -> {len(merged)} entries")
        self._replace_entries(merged.items())
        return self

    def chunk(self: 'Store', size: int) -> 'Store':
        """consecutive groups of up to size entries, as a store of stores. keys are kept inside each chunk."""
        from ..store import Store
        if size < 1:
            raise InvalidArgument(f"chunk size must be positive, got {size}")
        result = Store()
        items = list(self._data.items())
        for start in range(0, len(items), size):
            result.push(Store.from_pairs(items[start:start + size]))
        return result

    def split(self: 'Store', condition: Predicate, left_key: Key = 0, right_key: Key = 1) -> 'Store':
        """
        partition into two new stores under left_key (condition true) and right_key (false).
        both sides keep the original keys.
        """
        from ..store import Store
        if left_key == right_key:
            raise InvalidArgument("split needs two distinct labels")
        fn = adapt(condition)
        left, right = Store(), Store()
        for key, value in list(self._data.items()):
            (left if fn(value, key, self) else right).insert(key, value)
        return Store.from_pairs([(left_key, left), (right_key, right)])

    def unique(self: 'Store', flags: Union[SortFlag, str] = SortFlag.REGULAR) -> 'Store':
        """
        a new store with the first occurrence of every value, under its original key.
        REGULAR compares with ==, NUMERIC by numeric value, STRING by str() form.
        """
        from ..store import Store
        identity = _identity_for(flags)
        result = Store()
        seen_hashable = set()
        seen_other = []
        for key, value in self._data.items():
            marker = identity(value)
            try:
                if marker in seen_hashable:
                    continue
                seen_hashable.add(marker)
            except TypeError:
                # unhashable values (dicts, lists) fall back to a linear scan
                if any(marker == other for other in seen_other):
                    continue
                seen_other.append(marker)
            result.insert(key, value)
        return result

    def unique_by_key(self: 'Store', field: Key, flags: Union[SortFlag, str] = SortFlag.REGULAR) -> 'Store':
        """distinct values of one field across the record-like entries that have it"""
        from ..store import Store
        collected = Store()
        for value in self._data.values():
            if has_field(value, field):
                collected.push(field_of(value, field))
        return collected.unique(flags)
