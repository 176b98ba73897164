"""Config – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import TypeVar

from globalphone.config.settings import Settings

T = TypeVar("T", bound=Settings)


class EnvSettingsLoader:
    """Load settings from ``<PREFIX>_<FIELD>`` environment variables.

    Settings fields are plain strings with defaults; a variable that is
    not set leaves its field at the default. Pass *environ* to read from
    a mapping other than :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = settings_class._prefix.upper()
        values: dict[str, str] = {}
        for field in dataclasses.fields(settings_class):
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            if env_key in environ:
                values[field.name] = environ[env_key]
        return settings_class(**values)


__all__ = ["EnvSettingsLoader"]
