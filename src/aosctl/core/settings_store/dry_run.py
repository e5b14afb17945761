"""No-op wrapper for the settings store."""

from aosctl.cli.output import user_output
from aosctl.core.settings_store.abc import SettingKey, SettingsStore, require_value


class DryRunSettingsStore(SettingsStore):
    """Wrapper that reads through and reports writes instead of performing them."""

    def __init__(self, wrapped: SettingsStore) -> None:
        self._wrapped = wrapped

    def get(self, key: SettingKey) -> str | None:
        return self._wrapped.get(key)

    def list_all(self) -> dict[SettingKey, str]:
        return self._wrapped.list_all()

    def location(self) -> str:
        return self._wrapped.location()

    def set(self, key: SettingKey, value: str) -> None:
        require_value(key, value)
        user_output(f"[DRY RUN] Would set {key.value} = {value} in {self.location()}")

    def delete(self, key: SettingKey) -> None:
        user_output(f"[DRY RUN] Would delete {key.value} from {self.location()}")
