"""Config – 12-factor settings and the environment loader."""

from globalphone.config.loaders import EnvSettingsLoader
from globalphone.config.settings import GlobalPhoneSettings, Settings

__all__ = ["EnvSettingsLoader", "GlobalPhoneSettings", "Settings"]
