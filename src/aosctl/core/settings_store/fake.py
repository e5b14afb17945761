"""In-memory settings store for tests."""

from aosctl.core.settings_store.abc import SettingKey, SettingsStore, require_value


class InMemorySettingsStore(SettingsStore):
    """Test implementation that keeps settings in a dict."""

    def __init__(self, values: dict[SettingKey, str] | None = None) -> None:
        """Initialize in-memory store.

        Args:
            values: Initial settings (None = nothing set)
        """
        self._values = dict(values or {})
        self._writes: list[tuple[SettingKey, str]] = []

    @property
    def writes(self) -> list[tuple[SettingKey, str]]:
        """(key, value) pairs passed to set(), for test assertions."""
        return self._writes.copy()

    def get(self, key: SettingKey) -> str | None:
        return self._values.get(key)

    def set(self, key: SettingKey, value: str) -> None:
        require_value(key, value)
        self._writes.append((key, value))
        self._values[key] = value

    def delete(self, key: SettingKey) -> None:
        self._values.pop(key, None)

    def list_all(self) -> dict[SettingKey, str]:
        return dict(self._values)

    def location(self) -> str:
        return "memory://settings"
