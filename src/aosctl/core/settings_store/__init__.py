"""Deployment settings store subpackage."""

from aosctl.core.settings_store.abc import SettingKey, SettingsStore
from aosctl.core.settings_store.dry_run import DryRunSettingsStore
from aosctl.core.settings_store.fake import InMemorySettingsStore
from aosctl.core.settings_store.real import DEFAULT_REGISTRY_KEY, RegistrySettingsStore

__all__ = [
    "DEFAULT_REGISTRY_KEY",
    "DryRunSettingsStore",
    "InMemorySettingsStore",
    "RegistrySettingsStore",
    "SettingKey",
    "SettingsStore",
]
