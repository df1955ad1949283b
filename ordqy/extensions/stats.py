from __future__ import annotations
import typing
from ..types import *
from ..errors import DivisionByZero, InvalidArgument
from ..helpers import adapt, has_field, field_of, to_number, ordering_key

if typing.TYPE_CHECKING:
    from ..store import Store


class StatsAccessor(Generic[T]):
    def __init__(self, store_instance: 'Store'):
        self._store = store_instance

    def accumulate(self, reducer: Reducer) -> Any:
        """
        left fold of reducer(accumulator, value, key, store), starting from 0.0.
        returns the last accumulator.
        """
        fn = adapt(reducer, max_args=4)
        accumulator = 0.0
        for key, value in list(self._store._data.items()):
            accumulator = fn(accumulator, value, key, self._store)
        return accumulator

    def sum(self) -> float:
        """calc sum. numeric strings count, anything else non-numeric raises InvalidArgument"""
        return self.accumulate(lambda acc, value: acc + float(to_number(value)))

    def sum_int(self) -> int:
        """sum truncated towards zero"""
        return int(self.sum())

    def average(self) -> float:
        count = self._store.count()
        if count == 0: raise DivisionByZero("cannot calculate average of empty store")
        return self.sum() / count

    def _fold(self, projection: Projection, pick: Callable[[Any, Any], Any]) -> Any:
        """
        fold the projected values with pick; a projection of None skips the entry.
        mixed types are ordered numbers first, then by type name.
        """
        fn = adapt(projection)
        best = None
        for key, item in list(self._store._data.items()):
            value = fn(item, key, self._store)
            if value is None:
                continue
            try:
                best = value if best is None else pick(best, value, key=ordering_key)
            except TypeError as e:
                raise InvalidArgument(f"cannot compare {best!r} with {value!r}: {e}") from None
        return best

    def min(self) -> Any:
        """smallest value, None when empty"""
        return self.min_custom(lambda item: item)

    def min_sub(self, field: Key) -> Any:
        """smallest value of a record field, skipping entries without it"""
        return self.min_custom(lambda item: field_of(item, field) if has_field(item, field) else None)

    def min_custom(self, projection: Projection) -> Any:
        return self._fold(projection, min)

    def max(self) -> Any:
        """largest value, None when empty"""
        return self.max_custom(lambda item: item)

    def max_child(self, field: Key) -> Any:
        """largest value of a record field, skipping entries without it"""
        return self.max_custom(lambda item: field_of(item, field) if has_field(item, field) else None)

    def max_custom(self, projection: Projection) -> Any:
        return self._fold(projection, max)
