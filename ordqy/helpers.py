from __future__ import annotations
import typing
import inspect
import numbers
from collections.abc import Mapping
import numpy as np
import pandas as pd
from .types import *
from .errors import InvalidArgument, NotCollectionOrArray

if typing.TYPE_CHECKING:
    from .store import Store

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


# --- callbacks ---

def adapt(func: Callable, max_args: int = 3) -> Callable:
    """
    wraps a callback so it only receives as many positional arguments as it declares.
    operations always offer (value, key, store) - a one-parameter lambda just gets the value.
    """
    if isinstance(func, type):
        # constructors such as str or float convert the value only
        return lambda *args: func(args[0])
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # some builtins have no introspectable signature
        return lambda *args: func(args[0])

    if any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params):
        return func
    arity = sum(1 for p in params if p.kind in _POSITIONAL)
    if arity >= max_args:
        return func
    return lambda *args: func(*args[:arity])


# --- keys ---

def normalize_key(key: Any) -> Key:
    """coerce a key for writing. ints and strs only; bools and numpy ints become ints."""
    if isinstance(key, str):
        return key
    if isinstance(key, numbers.Integral):
        return int(key)
    raise InvalidArgument(f"keys must be int or str, got {type(key).__name__}")


def lookup_key(key: Any) -> Key:
    """
    key coercion for reads, accepting what normalize_key accepts.
    any other type (floats included) raises TypeError, which readers treat as a miss.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, numbers.Integral):
        return int(key)
    raise TypeError(f"unsupported key type: {type(key).__name__}")


def renumber(pairs: Iterable[Pair]) -> List[Pair]:
    """re-key integer-keyed entries 0..n-1 in order, keeping string keys (array reindex semantics)"""
    result = []
    index = 0
    for key, value in pairs:
        if isinstance(key, int):
            result.append((index, value))
            index += 1
        else:
            result.append((key, value))
    return result


# --- values ---

def to_number(value: Any, strict: bool = True) -> Union[int, float]:
    """
    reads a value as a number. numeric strings count as numbers.
    strict mode raises on anything else, lenient mode reads it as 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            pass
    if strict:
        raise InvalidArgument(f"value is not numeric: {value!r}")
    return 0


def ordering_key(value: Any) -> Tuple[int, str, Any]:
    """
    sort key for values of mixed types: None first, then numbers,
    then everything else grouped by type name.
    """
    if value is None:
        return (0, '', 0)
    if isinstance(value, numbers.Real):
        return (1, '', value)
    return (2, type(value).__name__, value)


def strictly_equal(left: Any, right: Any) -> bool:
    """same object, or same type and equal"""
    if left is right:
        return True
    return type(left) is type(right) and bool(left == right)


def loosely_equal(left: Any, right: Any) -> bool:
    return bool(left == right)


def _store_type():
    from .store import Store
    return Store


def is_nested(value: Any) -> bool:
    """whether flatten() may dissolve this value"""
    return isinstance(value, (dict, list, tuple, _store_type()))


def items_of(value: Any) -> List[Pair]:
    """entries of a nested value; sequences are keyed by position"""
    if isinstance(value, _store_type()):
        return list(value.data.items())
    if isinstance(value, Mapping):
        return list(value.items())
    return list(enumerate(value))


def has_field(record: Any, field: Any) -> bool:
    if isinstance(record, _store_type()):
        return record.key_exists(field)
    if isinstance(record, Mapping):
        return field in record
    if isinstance(field, str) and not isinstance(record, (str, bytes, numbers.Number)):
        return hasattr(record, field)
    return False


def field_of(record: Any, field: Any) -> Any:
    """reads a field from a record-like value (mapping, store or attribute holder)"""
    if not has_field(record, field):
        raise InvalidArgument(f"entry {record!r} has no field {field!r}")
    if isinstance(record, _store_type()):
        return record.get(field)
    if isinstance(record, Mapping):
        return record[field]
    return getattr(record, field)


# --- sources ---

def pairs_of(source: Any) -> List[Pair]:
    """
    entries of anything a store can be built from: a store, a mapping, a pandas series,
    or a sequence/iterable of values (keyed by position).
    """
    if isinstance(source, _store_type()):
        return list(source.data.items())
    if isinstance(source, Mapping):
        return list(source.items())
    if isinstance(source, pd.Series):
        return list(source.items())
    if isinstance(source, np.ndarray):
        return list(enumerate(source.tolist()))
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise NotCollectionOrArray(f"cannot build a store from {type(source).__name__}")
    return list(enumerate(source))
