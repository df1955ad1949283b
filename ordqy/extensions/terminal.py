from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..store import Store


class TerminalAccessor(Generic[T]):
    def __init__(self, store_instance: 'Store'):
        self._store = store_instance

    def list(self) -> List[T]:
        """values, in order"""
        return list(self._store._data.values())

    def dict(self) -> Dict[Key, T]:
        """shallow copy of the backing dict"""
        return dict(self._store._data)

    def pairs(self) -> List[Pair]:
        return list(self._store._data.items())

    def keys(self) -> List[Key]:
        return list(self._store._data.keys())

    def array(self) -> np.ndarray:
        """convert values to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series indexed by key"""
        data = self._store._data
        if not data:
            return pd.Series([], dtype=object)
        return pd.Series(list(data.values()), index=list(data.keys()))

    def frame(self) -> pd.DataFrame:
        """convert record values to a pandas dataframe indexed by key"""
        from ..store import Store
        data = self._store._data
        records = [value.to.dict() if isinstance(value, Store) else value for value in data.values()]
        return pd.DataFrame(records, index=list(data.keys()))
