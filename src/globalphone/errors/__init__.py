"""globalphone error hierarchy — public re-export surface.

Hierarchy::

    GlobalPhoneError
    ├── ParseError               (parsing.py)
    │   └── NotPossibleError
    ├── UnknownTerritoryError
    ├── NoDatabaseError
    └── ConfigError              (config.py)
        ├── InvalidSettingValueError
        └── DataLoadError
"""

from globalphone.errors.base import GlobalPhoneError
from globalphone.errors.config import (
    ConfigError,
    DataLoadError,
    InvalidSettingValueError,
)
from globalphone.errors.parsing import (
    NoDatabaseError,
    NotPossibleError,
    ParseError,
    UnknownTerritoryError,
)

__all__ = [
    "ConfigError",
    "DataLoadError",
    "GlobalPhoneError",
    "InvalidSettingValueError",
    "NoDatabaseError",
    "NotPossibleError",
    "ParseError",
    "UnknownTerritoryError",
]
