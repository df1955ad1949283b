from __future__ import annotations
import typing
import numpy as np
from ..types import *
from ..helpers import adapt, field_of, strictly_equal, loosely_equal
from ..config import get_settings

if typing.TYPE_CHECKING:
    from ..store import Store


def _levenshtein_python(source: str, target: str) -> int:
    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, 1):
        current = [i]
        for j, target_char in enumerate(target, 1):
            current.append(min(previous[j] + 1,
                               current[j - 1] + 1,
                               previous[j - 1] + (source_char != target_char)))
        previous = current
    return previous[-1]


def levenshtein(source: str, target: str) -> int:
    """edit distance between two strings (insert, delete and substitute all cost 1)"""
    if not source:
        return len(target)
    if not target:
        return len(source)
    if not get_settings().use_numpy:
        return _levenshtein_python(source, target)

    # one dp row per source char. deletions and substitutions are vectorised;
    # the insertion chain cur[j] = min(cur[j-1] + 1, ...) is a running minimum
    # of (base - j) shifted back by j.
    target_chars = np.array(list(target))
    offsets = np.arange(len(target) + 1)
    previous = offsets.copy()
    for i, source_char in enumerate(source, 1):
        cost = (target_chars != source_char).astype(np.int64)
        base = np.empty_like(previous)
        base[0] = i
        base[1:] = np.minimum(previous[1:] + 1, previous[:-1] + cost)
        previous = np.minimum.accumulate(base - offsets) + offsets
    return int(previous[-1])


class _SearchOperations(Generic[T]):
    def find(self: 'Store', condition: Predicate) -> Lookup:
        """first entry the condition accepts, as a Lookup (falsy when nothing matched)"""
        fn = adapt(condition)
        for key, value in list(self._data.items()):
            if fn(value, key, self):
                return Lookup.hit(key, value)
        return Lookup.miss()

    def find_index(self: 'Store', condition: Predicate) -> Optional[Key]:
        """key of the first accepted entry, None when nothing matched"""
        found = self.find(condition)
        return found.key if found else None

    def index_of(self: 'Store', value: Any, strict: bool = True) -> Optional[Key]:
        same = strictly_equal if strict else loosely_equal
        for key, candidate in self._data.items():
            if same(candidate, value):
                return key
        return None

    def last_index_of(self: 'Store', value: Any, strict: bool = True) -> Optional[Key]:
        same = strictly_equal if strict else loosely_equal
        index = None
        for key, candidate in self._data.items():
            if same(candidate, value):
                index = key
        return index

    def contains(self: 'Store', value: Any, strict: bool = True) -> bool:
        return self.index_of(value, strict) is not None

    def remove_item(self: 'Store', item: Any) -> bool:
        """remove the first entry strictly equal to item. returns whether one was removed."""
        key = self.index_of(item)
        if key is None:
            return False
        self.remove(key)
        return True

    def test_any(self: 'Store', test: Predicate) -> bool:
        fn = adapt(test)
        return any(fn(value, key, self) for key, value in list(self._data.items()))

    def test_all(self: 'Store', test: Predicate) -> bool:
        """true when every entry passes; vacuously true on an empty store"""
        fn = adapt(test)
        return all(fn(value, key, self) for key, value in list(self._data.items()))

    def find_closest(self: 'Store', field: Optional[Key], target: str,
                     max_distance: Optional[int] = -1) -> 'Store':
        """
        scores every entry by edit distance to target and returns the matches as a new store
        of {'score', 'key', 'entry'} records keyed 0..n-1, closest first. ties keep their order.

        :param field: record field to compare, or None to compare the entry itself
        :param target: string to compare against
        :param max_distance: largest score kept; -1 or None keeps everything
        """
        from ..store import Store
        unlimited = max_distance is None or max_distance < 0
        scored = []
        for key, entry in self._data.items():
            subject = entry if field is None else field_of(entry, field)
            score = levenshtein(target, str(subject))
            if unlimited or score <= max_distance:
                scored.append({'score': score, 'key': key, 'entry': entry})
        # list.sort is stable, so equal scores stay in store order
        scored.sort(key=lambda record: record['score'])
        return Store(scored)

    def find_closest_one(self: 'Store', field: Optional[Key], target: str,
                         max_distance: Optional[int] = None) -> Lookup:
        """the closest entry as a Lookup, a miss when nothing qualifies"""
        closest = self.find_closest(field, target, max_distance)
        if closest.is_empty():
            return Lookup.miss()
        best = closest.first()
        return Lookup.hit(best['key'], best['entry'])
