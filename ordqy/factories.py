import typing
from .types import *

if typing.TYPE_CHECKING:
    import pandas as pd
    from .store import Store, AliasedStore

def from_iterable(data: Any) -> 'Store':
    """create an owned store from a dict, a store, a series or any iterable of values (copied)"""
    from .store import Store
    return Store(data)

def from_pairs(pairs: Iterable[Pair]) -> 'Store':
    """create store from (key, value) pairs"""
    from .store import Store
    return Store.from_pairs(pairs)

def from_range(start: int, count: int) -> 'Store':
    """create store from range"""
    from .store import Store
    return Store(range(start, start + count))

def from_series(series: 'pd.Series') -> 'Store':
    """create store from a pandas series, its index becomes the keys"""
    from .store import Store
    return Store(series)

def empty() -> 'Store':
    """create empty store"""
    from .store import Store
    return Store()

def alias(data: Dict[Key, Any]) -> 'AliasedStore':
    """bind a store to the caller's dict itself - no copy, writes show up on both sides"""
    from .store import AliasedStore
    return AliasedStore(data)

def unwrap(subject: Any) -> Union[Dict[Key, Any], List[Any]]:
    """the mutable data behind a store, dict or list"""
    from .store import Store
    return Store.unwrap(subject)

# --- aliases ---
S = from_iterable
