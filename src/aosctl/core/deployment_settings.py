"""Deployment settings with fallback discovery.

Each value is read from the settings store first. When unset, it is
discovered from the web server (site name, install path) or from the
application's web.config (database, binaries, metadata, URL). A chain that
ends with nothing raises NotFoundError.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from aosctl.core import web_config
from aosctl.core.errors import NotFoundError
from aosctl.core.settings_store import SettingKey, SettingsStore
from aosctl.core.site_resolver import first_resolved, require, resolve_site
from aosctl.core.tool_config import DEFAULT_SITE_NAMES
from aosctl.core.webserver import WebServer

logger = logging.getLogger(__name__)

WEB_CONFIG_FILE = "web.config"

# Settings discovered from web.config when not stored explicitly
_WEB_CONFIG_KEYS: dict[SettingKey, str] = {
    SettingKey.DATABASE_NAME: web_config.DATABASE_NAME_KEY,
    SettingKey.DATABASE_SERVER: web_config.DATABASE_SERVER_KEY,
    SettingKey.BINARIES_PATH: web_config.BINARIES_DIR_KEY,
    SettingKey.METADATA_PATH: web_config.METADATA_DIR_KEY,
    SettingKey.SERVER_URL: web_config.HOST_URL_KEY,
}


class DeploymentSettings:
    """Read-through view of the deployment's settings.

    Example:
        settings = DeploymentSettings(ctx.settings, ctx.web_server)
        db = settings.database_name()  # store, else web.config DataAccess.Database
    """

    def __init__(
        self,
        store: SettingsStore,
        web_server: WebServer,
        *,
        site_names: Iterable[str] = DEFAULT_SITE_NAMES,
    ) -> None:
        self._store = store
        self._web_server = web_server
        self._site_names = tuple(site_names)

    def remember(self, key: SettingKey, value: str) -> None:
        """Persist a setting so later runs skip discovery."""
        logger.debug("Remembering %s = %s", key.value, value)
        self._store.set(key, value)

    def website_name(self) -> str:
        """Stored website name, else the first default site that exists."""
        stored = self._store.get(SettingKey.WEBSITE_NAME)
        if stored is not None:
            return stored
        return resolve_site(self._web_server, default_names=self._site_names).name

    def install_path(self) -> Path:
        """Stored install path, else the physical path of the deployment's site."""
        stored = self._store.get(SettingKey.INSTALL_PATH)
        if stored is not None:
            return Path(stored)
        site = resolve_site(
            self._web_server,
            self._store.get(SettingKey.WEBSITE_NAME),
            default_names=self._site_names,
        )
        return site.physical_path

    def web_config_path(self) -> Path:
        return self.install_path() / WEB_CONFIG_FILE

    def database_name(self) -> str:
        return self._from_store_or_web_config(SettingKey.DATABASE_NAME)

    def database_server(self) -> str:
        return self._from_store_or_web_config(SettingKey.DATABASE_SERVER)

    def binaries_path(self) -> Path:
        return Path(self._from_store_or_web_config(SettingKey.BINARIES_PATH))

    def metadata_path(self) -> Path:
        return Path(self._from_store_or_web_config(SettingKey.METADATA_PATH))

    def server_url(self) -> str:
        return self._from_store_or_web_config(SettingKey.SERVER_URL)

    def packages_path(self) -> Path:
        """Stored packages path, else the binaries path.

        On one-box deployments the packages live beside the binaries.
        """
        stored = self._store.get(SettingKey.PACKAGES_PATH)
        if stored is not None:
            return Path(stored)
        return self.binaries_path()

    def backup_path(self) -> Path | None:
        """Stored backup path. There is nothing to discover it from."""
        stored = self._store.get(SettingKey.BACKUP_PATH)
        if stored is None:
            return None
        return Path(stored)

    def value(self, key: SettingKey) -> str | None:
        """Resolve any key as a string, None only for keys without discovery."""
        resolvers = {
            SettingKey.INSTALL_PATH: lambda: str(self.install_path()),
            SettingKey.WEBSITE_NAME: self.website_name,
            SettingKey.PACKAGES_PATH: lambda: str(self.packages_path()),
            SettingKey.BACKUP_PATH: lambda: self._store.get(SettingKey.BACKUP_PATH),
        }
        if key in resolvers:
            return resolvers[key]()
        return self._from_store_or_web_config(key)

    def _from_store_or_web_config(self, key: SettingKey) -> str:
        web_config_key = _WEB_CONFIG_KEYS[key]
        value = first_resolved(
            [
                lambda: self._store.get(key),
                lambda: self._read_web_config(web_config_key),
            ]
        )
        return require(value, "Setting", key.value)

    def _read_web_config(self, web_config_key: str) -> str | None:
        path = self.web_config_path()
        try:
            value = web_config.read_app_setting(path, web_config_key)
        except NotFoundError:
            logger.debug("%s not available from %s", web_config_key, path)
            return None
        return value or None
