"""Registry-backed settings store.

winreg is imported inside each method so this module stays importable on
hosts without a Windows registry.
"""

import logging

from aosctl.core.settings_store.abc import SettingKey, SettingsStore, require_value

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_KEY = r"SOFTWARE\AosCtl\Deployment"


class RegistrySettingsStore(SettingsStore):
    """Production implementation storing REG_SZ values under HKEY_LOCAL_MACHINE."""

    def __init__(self, subkey: str = DEFAULT_REGISTRY_KEY) -> None:
        self._subkey = subkey

    def get(self, key: SettingKey) -> str | None:
        import winreg

        try:
            with winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE, self._subkey, 0, winreg.KEY_READ
            ) as hkey:
                value, _value_type = winreg.QueryValueEx(hkey, key.value)
        except FileNotFoundError:
            # Either the key or the value is missing; both mean "unset"
            return None
        if value is None or value == "":
            return None
        return str(value)

    def set(self, key: SettingKey, value: str) -> None:
        import winreg

        require_value(key, value)
        logger.debug("Writing %s to %s", key.value, self.location())
        with winreg.CreateKeyEx(
            winreg.HKEY_LOCAL_MACHINE, self._subkey, 0, winreg.KEY_WRITE
        ) as hkey:
            winreg.SetValueEx(hkey, key.value, 0, winreg.REG_SZ, value)

    def delete(self, key: SettingKey) -> None:
        import winreg

        try:
            with winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE, self._subkey, 0, winreg.KEY_WRITE
            ) as hkey:
                winreg.DeleteValue(hkey, key.value)
        except FileNotFoundError:
            logger.debug("Setting %s was not set", key.value)

    def list_all(self) -> dict[SettingKey, str]:
        values: dict[SettingKey, str] = {}
        for key in SettingKey:
            value = self.get(key)
            if value is not None:
                values[key] = value
        return values

    def location(self) -> str:
        return f"HKEY_LOCAL_MACHINE\\{self._subkey}"
