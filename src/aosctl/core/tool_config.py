"""Tool configuration data structures and loading.

Provides immutable tool configuration loaded from ~/.aosctl/config.toml (or
the file named by AOSCTL_CONFIG). Every field has a default, so a missing
file yields the stock configuration for a one-box deployment.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import tomlkit

from aosctl.core.settings_store import DEFAULT_REGISTRY_KEY

DEFAULT_SERVICE_NAMES = (
    "DynamicsAxBatch",
    "Microsoft.Dynamics.AX.Framework.Tools.DMF.SSISHelperService.exe",
    "MR2012ProcessService",
)
DEFAULT_SITE_NAMES = ("AosService", "AosWebApplication")
DEFAULT_LIGHTWEIGHT_HOST = "iisexpress"
DEFAULT_PACKAGES = ("git", "vscode", "googlechrome", "notepadplusplus", "7zip", "sysinternals")

CONFIG_ENV_VAR = "AOSCTL_CONFIG"


@dataclass(frozen=True)
class ToolConfig:
    """Immutable tool configuration.

    Loaded once at CLI entry point and stored in AosContext.
    All fields are read-only after construction.
    """

    service_names: tuple[str, ...] = DEFAULT_SERVICE_NAMES
    site_names: tuple[str, ...] = DEFAULT_SITE_NAMES
    lightweight_host_process: str = DEFAULT_LIGHTWEIGHT_HOST
    service_stop_timeout_seconds: float = 120.0
    process_exit_timeout_seconds: float = 60.0
    web_stop_timeout_seconds: float = 60.0
    poll_interval_seconds: float = 2.0
    registry_key: str = DEFAULT_REGISTRY_KEY
    packages: tuple[str, ...] = DEFAULT_PACKAGES


_LIST_FIELDS = {"service_names", "site_names", "packages"}
_FLOAT_FIELDS = {
    "service_stop_timeout_seconds",
    "process_exit_timeout_seconds",
    "web_stop_timeout_seconds",
    "poll_interval_seconds",
}


def parse_tool_config(data: dict[str, Any], source: str) -> ToolConfig:
    """Build a ToolConfig from parsed TOML data, applying defaults.

    Raises:
        ValueError: If a key is unknown or a value has the wrong type
    """
    known = {f.name for f in fields(ToolConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown setting(s) in {source}: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for name, raw in data.items():
        if name in _LIST_FIELDS:
            if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
                raise ValueError(f"'{name}' in {source} must be a list of strings")
            values[name] = tuple(raw)
        elif name in _FLOAT_FIELDS:
            if isinstance(raw, bool) or not isinstance(raw, int | float) or raw <= 0:
                raise ValueError(f"'{name}' in {source} must be a positive number")
            values[name] = float(raw)
        else:
            if not isinstance(raw, str) or not raw:
                raise ValueError(f"'{name}' in {source} must be a non-empty string")
            values[name] = raw

    return ToolConfig(**values)


class ToolConfigOps(ABC):
    """Abstract interface for tool config operations.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a config file exists."""
        ...

    @abstractmethod
    def load(self) -> ToolConfig:
        """Load tool config, falling back to defaults when none exists.

        Raises:
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: ToolConfig) -> None:
        """Save tool config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for messages and debugging)."""
        ...


class FilesystemToolConfigOps(ToolConfigOps):
    """Production implementation that reads/writes a TOML file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> ToolConfig:
        config_path = self.path()
        if not config_path.exists():
            return ToolConfig()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e
        return parse_tool_config(data, str(config_path))

    def save(self, config: ToolConfig) -> None:
        """Save tool config, preserving comments of an existing file.

        Raises:
            PermissionError: If directory or file cannot be written
        """
        config_path = self.path()
        parent = config_path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(
                f"Cannot write to directory: {parent}\n"
                f"The directory exists but is not writable."
            )
        parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("aosctl configuration"))

        for f in fields(ToolConfig):
            value = getattr(config, f.name)
            doc[f.name] = list(value) if isinstance(value, tuple) else value

        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        """Get the path to the config file.

        Returns:
            Explicit path, else $AOSCTL_CONFIG, else ~/.aosctl/config.toml
        """
        if self._config_path is not None:
            return self._config_path
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override)
        return Path.home() / ".aosctl" / "config.toml"


class InMemoryToolConfigOps(ToolConfigOps):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: ToolConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> ToolConfig:
        if self._config is None:
            return ToolConfig()
        return self._config

    def save(self, config: ToolConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/aosctl/config.toml")
