"""Read appSettings from the application server's web.config.

The document has a fixed shape::

    <configuration>
      <appSettings>
        <add key="DataAccess.Database" value="AxDB" />
      </appSettings>
    </configuration>
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from aosctl.core.errors import NotFoundError

DATABASE_NAME_KEY = "DataAccess.Database"
DATABASE_SERVER_KEY = "DataAccess.DbServer"
BINARIES_DIR_KEY = "Common.BinDir"
METADATA_DIR_KEY = "Aos.MetadataDirectory"
HOST_URL_KEY = "Infrastructure.HostUrl"


def _load_app_settings(path: Path) -> list[ET.Element]:
    if not path.is_file():
        raise NotFoundError("web.config", str(path))
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ValueError(f"Malformed web.config at {path}: {e}") from e
    if root.tag != "configuration":
        raise ValueError(f"Unexpected root element <{root.tag}> in {path}")
    return root.findall("./appSettings/add")


def read_app_settings(path: Path) -> dict[str, str]:
    """Return every appSettings entry as a key -> value mapping.

    Raises:
        NotFoundError: If the file does not exist
        ValueError: If the file is not a well-formed configuration document
    """
    return {
        element.attrib["key"]: element.attrib.get("value", "")
        for element in _load_app_settings(path)
        if "key" in element.attrib
    }


def read_app_setting(path: Path, key: str) -> str:
    """Return the value of /configuration/appSettings/add[@key=key].

    Raises:
        NotFoundError: If the file or the key does not exist
        ValueError: If the file is not a well-formed configuration document
    """
    for element in _load_app_settings(path):
        if element.attrib.get("key") == key:
            return element.attrib.get("value", "")
    raise NotFoundError("web.config setting", key, detail=str(path))
