"""Tests for reading appSettings from web.config."""

from pathlib import Path

import pytest

from aosctl.core import web_config
from aosctl.core.errors import NotFoundError
from tests.test_utils.deployment import write_web_config


def test_reads_single_setting(tmp_path: Path) -> None:
    path = write_web_config(tmp_path, {web_config.DATABASE_NAME_KEY: "AxDB"})

    assert web_config.read_app_setting(path, "DataAccess.Database") == "AxDB"


def test_reads_all_settings(tmp_path: Path) -> None:
    path = write_web_config(
        tmp_path,
        {
            web_config.DATABASE_SERVER_KEY: "localhost",
            web_config.BINARIES_DIR_KEY: r"K:\AosService\PackagesLocalDirectory\bin",
        },
    )

    settings = web_config.read_app_settings(path)

    assert settings == {
        "DataAccess.DbServer": "localhost",
        "Common.BinDir": r"K:\AosService\PackagesLocalDirectory\bin",
    }


def test_missing_key_raises_not_found(tmp_path: Path) -> None:
    path = write_web_config(tmp_path, {web_config.DATABASE_NAME_KEY: "AxDB"})

    with pytest.raises(NotFoundError) as exc_info:
        web_config.read_app_setting(path, web_config.HOST_URL_KEY)

    assert exc_info.value.kind == "web.config setting"
    assert exc_info.value.name == "Infrastructure.HostUrl"


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError, match="web.config not found"):
        web_config.read_app_setting(tmp_path / "web.config", web_config.DATABASE_NAME_KEY)


def test_malformed_document_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "web.config"
    path.write_text("<configuration><appSettings>", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed web.config"):
        web_config.read_app_settings(path)


def test_unexpected_root_element_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "web.config"
    path.write_text('<settings><add key="a" value="b" /></settings>', encoding="utf-8")

    with pytest.raises(ValueError, match="Unexpected root element <settings>"):
        web_config.read_app_settings(path)


def test_entry_without_value_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "web.config"
    path.write_text(
        '<configuration><appSettings><add key="Aos.MetadataDirectory" /></appSettings>'
        "</configuration>",
        encoding="utf-8",
    )

    assert web_config.read_app_setting(path, web_config.METADATA_DIR_KEY) == ""
