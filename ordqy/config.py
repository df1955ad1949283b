"""
runtime settings for ordqy.

settings are a frozen dataclass held module-wide. change them with
configure(), read them with get_settings(). scripts that want to see the
library's debug output can call configure_logging().
"""
import os
import logging
from dataclasses import dataclass, replace, fields, asdict
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """configuration for store operations"""
    use_numpy: bool = True          # numeric sorts and levenshtein go through numpy
    numpy_min_size: int = 32        # smaller stores are sorted in pure python
    join_separator: str = ','
    log_level: str = 'WARNING'


_active = Settings()

_ENV_PREFIX = 'ORDQY_'


def get_settings() -> Settings:
    return _active


def configure(**changes: Any) -> Settings:
    """replace the active settings with the given fields changed"""
    global _active
    known = {f.name for f in fields(Settings)}
    unknown = set(changes) - known
    if unknown:
        raise InvalidArgument(f"unknown settings: {', '.join(sorted(unknown))}")
    _active = replace(_active, **changes)
    logger.debug(f"settings changed: {asdict(_active)}")
    return _active


def reset_settings() -> Settings:
    global _active
    _active = Settings()
    return _active


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """build settings from ORDQY_* environment variables, defaults for the rest"""
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}
    for f in fields(Settings):
        raw = env.get(_ENV_PREFIX + f.name.upper())
        if raw is None:
            continue
        if f.type in (bool, 'bool'):
            values[f.name] = _parse_bool(raw)
        elif f.type in (int, 'int'):
            try:
                values[f.name] = int(raw)
            except ValueError:
                raise InvalidArgument(f"{_ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}")
        else:
            values[f.name] = raw
    return Settings(**values)


def configure_logging(level: Optional[str] = None) -> None:
    """wire a basic handler for scripts; the library itself never installs handlers"""
    chosen = (level or _active.log_level).upper()
    logging.basicConfig(level=getattr(logging, chosen, logging.WARNING), format='%(asctime)s - %(message)s')
    logging.getLogger('ordqy').setLevel(getattr(logging, chosen, logging.WARNING))
