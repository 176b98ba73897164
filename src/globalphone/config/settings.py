"""Config – GlobalPhoneSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from globalphone.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class GlobalPhoneSettings(Settings):
    """Where territory data lives and how the library logs.

    An empty ``db_path`` is allowed; a context built from it refuses to
    parse until a database is supplied.
    """

    _prefix: ClassVar[str] = "GLOBALPHONE"

    db_path: str = ""
    default_territory_name: str = "US"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.default_territory_name.strip():
            raise InvalidSettingValueError(
                "default_territory_name", self.default_territory_name, "must not be empty"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        self.log_level = self.log_level.upper()


__all__ = ["GlobalPhoneSettings", "Settings"]
