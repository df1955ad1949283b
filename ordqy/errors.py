class StoreError(Exception):
    """base class for every error raised by ordqy"""
    pass


class KeyNotFound(StoreError, KeyError):
    """strict read of a key the store does not hold"""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class NotCollectionOrArray(StoreError, TypeError):
    """raised when something that is neither a store, a dict nor a list is unwrapped"""
    pass


class DivisionByZero(StoreError, ZeroDivisionError):
    """averaging an empty store"""
    pass


class InvalidArgument(StoreError, ValueError):
    """an argument the operation cannot work with (bad size, bad key type, non-record entry...)"""
    pass
