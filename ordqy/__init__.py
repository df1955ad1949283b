r"""
'                     __
'      ____  _________/ /___ ___  __
'     / __ \/ ___/ __  / __ `/ / / /
'    / /_/ / /  / /_/ / /_/ / /_/ /
'    \____/_/   \__,_/\__, /\__, /
'                       /_/ /____/
"""

# expose the main classes
from .store import Store, AliasedStore

# expose the factory functions
from .factories import (
    from_iterable,
    from_pairs,
    from_range,
    from_series,
    empty,
    alias,
    unwrap,
    S
)

# expose supporting types
from .types import (
    Ownership,
    SortFlag,
    Lookup
)

# expose errors
from .errors import (
    StoreError,
    KeyNotFound,
    NotCollectionOrArray,
    DivisionByZero,
    InvalidArgument
)

# expose configuration
from .config import (
    Settings,
    get_settings,
    configure,
    reset_settings,
    settings_from_env,
    configure_logging
)

# define what `import *` does
__all__ = [
    "Store",
    "AliasedStore",
    "from_iterable",
    "from_pairs",
    "from_range",
    "from_series",
    "empty",
    "alias",
    "unwrap",
    "S",
    "Ownership",
    "SortFlag",
    "Lookup",
    "StoreError",
    "KeyNotFound",
    "NotCollectionOrArray",
    "DivisionByZero",
    "InvalidArgument",
    "Settings",
    "get_settings",
    "configure",
    "reset_settings",
    "settings_from_env",
    "configure_logging"
]
