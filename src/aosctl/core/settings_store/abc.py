"""Deployment settings store interface.

Deployment-specific paths and names are remembered across invocations as
flat string key/value pairs. Absence of a key is not an error: get() returns
None and callers decide whether a fallback exists.
"""

from abc import ABC, abstractmethod
from enum import Enum


class SettingKey(Enum):
    """Known deployment settings. Values are the stored value names."""

    INSTALL_PATH = "InstallPath"
    BACKUP_PATH = "BackupPath"
    SERVER_URL = "ServerUrl"
    WEBSITE_NAME = "WebsiteName"
    DATABASE_NAME = "DatabaseName"
    DATABASE_SERVER = "DatabaseServer"
    BINARIES_PATH = "BinariesPath"
    METADATA_PATH = "MetadataPath"
    PACKAGES_PATH = "PackagesPath"

    @classmethod
    def from_name(cls, name: str) -> "SettingKey":
        """Look up a key by stored value name or enum name, case-insensitively.

        Raises:
            ValueError: If name matches no known key
        """
        wanted = name.strip().replace("-", "_").lower()
        for key in cls:
            if key.value.lower() == wanted.replace("_", "") or key.name.lower() == wanted:
                return key
        valid = ", ".join(key.value for key in cls)
        raise ValueError(f"Unknown setting '{name}'. Valid settings: {valid}")


def require_value(key: SettingKey, value: str) -> str:
    """Reject empty values, which a store cannot tell apart from unset ones."""
    if not value:
        raise ValueError(f"{key.value} must not be set to an empty value")
    return value


class SettingsStore(ABC):
    """Abstract interface for the deployment settings store.

    Provides dependency injection for settings access, enabling in-memory
    implementations for tests without touching the registry.
    """

    @abstractmethod
    def get(self, key: SettingKey) -> str | None:
        """Read a setting.

        Returns:
            The stored value, or None if the setting is unset
        """
        ...

    @abstractmethod
    def set(self, key: SettingKey, value: str) -> None:
        """Write a setting, replacing any previous value.

        Raises:
            ValueError: If value is empty
        """
        ...

    @abstractmethod
    def delete(self, key: SettingKey) -> None:
        """Remove a setting. Removing an unset setting is a no-op."""
        ...

    @abstractmethod
    def list_all(self) -> dict[SettingKey, str]:
        """Return every setting that currently has a value."""
        ...

    @abstractmethod
    def location(self) -> str:
        """Describe where settings are stored (for messages and debugging)."""
        ...
