"""Tests for RegistrySettingsStore against an in-memory winreg module."""

import sys
import types
from contextlib import contextmanager

import pytest

from aosctl.core.settings_store import DEFAULT_REGISTRY_KEY, RegistrySettingsStore, SettingKey

HKLM = 0x80000002
REG_SZ = 1


class _Hive:
    """Registry keys under HKEY_LOCAL_MACHINE as subkey -> {value name: (data, type)}."""

    def __init__(self) -> None:
        self.keys: dict[str, dict[str, tuple[object, int]]] = {}

    def as_module(self) -> types.ModuleType:
        module = types.ModuleType("winreg")
        module.HKEY_LOCAL_MACHINE = HKLM
        module.KEY_READ = 0x20019
        module.KEY_WRITE = 0x20006
        module.REG_SZ = REG_SZ
        module.OpenKey = self.open_key
        module.CreateKeyEx = self.create_key
        module.QueryValueEx = self.query_value
        module.SetValueEx = self.set_value
        module.DeleteValue = self.delete_value
        return module

    @contextmanager
    def open_key(self, root: int, subkey: str, reserved: int = 0, access: int = 0):
        assert root == HKLM
        if subkey not in self.keys:
            raise FileNotFoundError(subkey)
        yield self.keys[subkey]

    @contextmanager
    def create_key(self, root: int, subkey: str, reserved: int = 0, access: int = 0):
        assert root == HKLM
        yield self.keys.setdefault(subkey, {})

    def query_value(self, hkey: dict, name: str) -> tuple[object, int]:
        if name not in hkey:
            raise FileNotFoundError(name)
        return hkey[name]

    def set_value(self, hkey: dict, name: str, reserved: int, kind: int, data: str) -> None:
        hkey[name] = (data, kind)

    def delete_value(self, hkey: dict, name: str) -> None:
        if name not in hkey:
            raise FileNotFoundError(name)
        del hkey[name]


@pytest.fixture
def hive(monkeypatch: pytest.MonkeyPatch) -> _Hive:
    hive = _Hive()
    monkeypatch.setitem(sys.modules, "winreg", hive.as_module())
    return hive


def test_set_then_get_round_trips(hive: _Hive) -> None:
    store = RegistrySettingsStore()

    store.set(SettingKey.INSTALL_PATH, r"K:\AosService\webroot")

    assert store.get(SettingKey.INSTALL_PATH) == r"K:\AosService\webroot"
    assert hive.keys[DEFAULT_REGISTRY_KEY]["InstallPath"] == (r"K:\AosService\webroot", REG_SZ)


def test_value_with_surrounding_spaces_is_kept(hive: _Hive) -> None:
    store = RegistrySettingsStore()

    store.set(SettingKey.BACKUP_PATH, " J:\\Backup ")

    assert store.get(SettingKey.BACKUP_PATH) == " J:\\Backup "


def test_missing_key_reads_as_unset(hive: _Hive) -> None:
    store = RegistrySettingsStore()

    assert store.get(SettingKey.SERVER_URL) is None
    assert store.list_all() == {}


def test_missing_value_under_existing_key_reads_as_unset(hive: _Hive) -> None:
    store = RegistrySettingsStore()
    store.set(SettingKey.DATABASE_NAME, "AxDB")

    assert store.get(SettingKey.DATABASE_SERVER) is None


def test_delete_removes_value(hive: _Hive) -> None:
    store = RegistrySettingsStore()
    store.set(SettingKey.SERVER_URL, "https://aos.local")

    store.delete(SettingKey.SERVER_URL)

    assert store.get(SettingKey.SERVER_URL) is None


def test_delete_unset_value_is_noop(hive: _Hive) -> None:
    store = RegistrySettingsStore()

    store.delete(SettingKey.SERVER_URL)
    store.set(SettingKey.DATABASE_NAME, "AxDB")
    store.delete(SettingKey.SERVER_URL)

    assert store.list_all() == {SettingKey.DATABASE_NAME: "AxDB"}


def test_list_all_returns_only_set_values(hive: _Hive) -> None:
    store = RegistrySettingsStore()
    store.set(SettingKey.WEBSITE_NAME, "CustomAos")
    store.set(SettingKey.DATABASE_NAME, "AxDB")

    assert store.list_all() == {
        SettingKey.WEBSITE_NAME: "CustomAos",
        SettingKey.DATABASE_NAME: "AxDB",
    }


def test_empty_value_is_rejected(hive: _Hive) -> None:
    store = RegistrySettingsStore()

    with pytest.raises(ValueError, match="WebsiteName must not be set to an empty value"):
        store.set(SettingKey.WEBSITE_NAME, "")

    assert hive.keys == {}


def test_custom_subkey_and_location(hive: _Hive) -> None:
    store = RegistrySettingsStore(r"SOFTWARE\Contoso\Aos")

    store.set(SettingKey.DATABASE_NAME, "AxDB")

    assert list(hive.keys) == [r"SOFTWARE\Contoso\Aos"]
    assert store.location() == r"HKEY_LOCAL_MACHINE\SOFTWARE\Contoso\Aos"
