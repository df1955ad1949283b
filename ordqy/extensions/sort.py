from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
import numpy as np
from ..types import *
from ..errors import InvalidArgument
from ..helpers import field_of, to_number, ordering_key
from ..config import get_settings

if typing.TYPE_CHECKING:
    from ..store import Store

logger = logging.getLogger(__name__)

_DIRECTIONS = {'asc': False, 'desc': True}
_EXACT_FLOAT_INT = 2 ** 53


def _descending(direction: Union[str, bool]) -> bool:
    """'asc'/'desc' (any case) or a bool meaning ascending"""
    if isinstance(direction, bool):
        return not direction
    try:
        return _DIRECTIONS[str(direction).lower()]
    except KeyError:
        raise InvalidArgument(f"sort direction must be 'asc' or 'desc', got {direction!r}") from None


def _normalize_fields(fields: Union[Mapping[Key, Any], Sequence[Any]]) -> List[Tuple[Key, bool]]:
    """accepts {'field': 'asc', ...}, [('field', 'desc'), ...] or ['field', ...]"""
    if isinstance(fields, Mapping):
        pairs = list(fields.items())
    else:
        pairs = [item if isinstance(item, tuple) else (item, 'asc') for item in fields]
    if not pairs:
        raise InvalidArgument("at least one sort field is required")
    return [(field, _descending(direction)) for field, direction in pairs]


class SortAccessor(Generic[T]):
    """
    the sort family. every sort is stable, runs in place and returns the store so calls chain.
    the plain variants re-key the result 0..n-1, the keep_keys variants move entries with their keys.
    """
    def __init__(self, store_instance: 'Store'):
        self._store = store_instance

    def _apply(self, ordered: List[Pair], keep_keys: bool) -> 'Store':
        if keep_keys:
            self._store._replace_entries(ordered)
        else:
            self._store._replace_entries(enumerate(value for _, value in ordered))
        return self._store

    def _try_numpy_order(self, sort_keys: List[Union[int, float]], descending: bool) -> Optional[List[int]]:
        """stable argsort through numpy for larger numeric stores, None to fall back"""
        settings = get_settings()
        if not settings.use_numpy or len(sort_keys) < settings.numpy_min_size:
            return None
        # float64 holds integers exactly only up to 2**53
        if any(isinstance(k, int) and abs(k) > _EXACT_FLOAT_INT for k in sort_keys):
            logger.debug("numpy sort fallback: integer keys beyond float precision")
            return None
        try:
            arr = np.asarray(sort_keys, dtype=float)
            return np.argsort(-arr if descending else arr, kind='stable').tolist()
        except (TypeError, ValueError, OverflowError) as e:
            logger.debug(f"numpy sort fallback: {e}")
            return None

    # --- by value ---

    def alphabetically(self, descending: bool = False, keep_keys: bool = False) -> 'Store':
        """sort by str() of each value"""
        pairs = list(self._store._data.items())
        ordered = sorted(pairs, key=lambda pair: str(pair[1]), reverse=descending)
        return self._apply(ordered, keep_keys)

    def alphabetically_desc(self) -> 'Store':
        return self.alphabetically(descending=True)

    def alphabetically_keep_keys(self) -> 'Store':
        return self.alphabetically(keep_keys=True)

    def alphabetically_desc_keep_keys(self) -> 'Store':
        return self.alphabetically(descending=True, keep_keys=True)

    def numerically(self, descending: bool = False, keep_keys: bool = False) -> 'Store':
        """sort by numeric value; numeric strings are numbers, other values count as 0"""
        pairs = list(self._store._data.items())
        sort_keys = [to_number(value, strict=False) for _, value in pairs]
        order = self._try_numpy_order(sort_keys, descending)
        if order is None:
            order = sorted(range(len(pairs)), key=lambda i: sort_keys[i], reverse=descending)
        return self._apply([pairs[i] for i in order], keep_keys)

    def numerically_desc(self) -> 'Store':
        return self.numerically(descending=True)

    def numerically_keep_keys(self) -> 'Store':
        return self.numerically(keep_keys=True)

    def numerically_desc_keep_keys(self) -> 'Store':
        return self.numerically(descending=True, keep_keys=True)

    def custom(self, comparator: Comparer, keep_keys: bool = False) -> 'Store':
        """sort with comparator(a, b) returning <0, 0 or >0"""
        pairs = list(self._store._data.items())
        ordered = sorted(pairs, key=cmp_to_key(lambda a, b: comparator(a[1], b[1])))
        return self._apply(ordered, keep_keys)

    def custom_keep_keys(self, comparator: Comparer) -> 'Store':
        return self.custom(comparator, keep_keys=True)

    # --- by key ---

    def keys_alphabetical(self, descending: bool = False) -> 'Store':
        pairs = list(self._store._data.items())
        return self._apply(sorted(pairs, key=lambda pair: str(pair[0]), reverse=descending), keep_keys=True)

    def keys_alphabetical_desc(self) -> 'Store':
        return self.keys_alphabetical(descending=True)

    def keys_numerical(self, descending: bool = False) -> 'Store':
        pairs = list(self._store._data.items())
        ordered = sorted(pairs, key=lambda pair: to_number(pair[0], strict=False), reverse=descending)
        return self._apply(ordered, keep_keys=True)

    def keys_numerical_desc(self) -> 'Store':
        return self.keys_numerical(descending=True)

    def keys_custom(self, comparator: Comparer) -> 'Store':
        pairs = list(self._store._data.items())
        return self._apply(sorted(pairs, key=cmp_to_key(lambda a, b: comparator(a[0], b[0]))), keep_keys=True)

    # --- by record fields ---

    def by_field(self, field: Key, ascending: bool = True) -> 'Store':
        return self.by_fields([(field, 'asc' if ascending else 'desc')])

    def by_fields(self, fields: Union[Mapping[Key, Any], Sequence[Any]]) -> 'Store':
        """
        multi-field sort on record values, keys kept. the first field decides, later fields
        break ties, full ties keep their order. None field values sort first.
        a value without a field, or field values that cannot be ordered, raise InvalidArgument.
        """
        directions = _normalize_fields(fields)
        ordered = list(self._store._data.items())
        # python's sort is stable, so we sort from the last field to the first
        for field, is_descending in reversed(directions):
            try:
                ordered = sorted(ordered, key=lambda pair: ordering_key(field_of(pair[1], field)),
                                 reverse=is_descending)
            except TypeError as e:
                raise InvalidArgument(f"cannot order values of field {field!r}: {e}") from None
        return self._apply(ordered, keep_keys=True)
