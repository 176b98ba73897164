"""Settings and territory-data errors."""

from __future__ import annotations

from globalphone.errors.base import GlobalPhoneError


class ConfigError(GlobalPhoneError):
    """Settings or territory data are unusable."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``GLOBALPHONE_*`` setting holds a value the library cannot use."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value


class DataLoadError(ConfigError):
    """A territory record is missing a field or carries a malformed one.

    ``path`` locates the offending record inside the loaded document.
    """

    default_code = "data_load_error"


__all__ = ["ConfigError", "DataLoadError", "InvalidSettingValueError"]
