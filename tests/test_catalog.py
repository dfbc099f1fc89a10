"""
Tests for catalog tables, live catalog queries and Appium versions.
"""

import json

from appium_installer.core.models.catalog import ItemKind
from appium_installer.core.models.config import InstallerConfig
from appium_installer.core.services.catalog import (
    DEFAULT_DRIVERS,
    DEFAULT_PLUGINS,
    DEFAULT_VERSIONS,
    canonical_name,
    default_catalog,
    fetch_available,
    fetch_versions,
    parse_extension_list,
    query_live_catalog,
    resolve_version,
)

DRIVER_LIST = "appium driver list --installed=false"
PLUGIN_LIST = "appium plugin list --installed=false"
NPM_VERSIONS = "npm view appium versions --json"


class TestStaticTables:
    def test_driver_table(self):
        assert len(DEFAULT_DRIVERS) == 16
        assert DEFAULT_DRIVERS[0] == "chromium (Chromium - Chrome, Edge)"
        assert DEFAULT_DRIVERS[-1] == "appium-youiengine-driver (You.i Engine - Legacy, Appium 1 only)"

    def test_plugin_table_keeps_duplicate_inspector(self):
        assert len(DEFAULT_PLUGINS) == 26
        names = [canonical_name(p) for p in DEFAULT_PLUGINS]
        assert names.count("appium-inspector") == 2

    def test_default_catalog_is_a_copy(self):
        drivers = default_catalog(ItemKind.DRIVER)
        drivers.append("extra")
        assert len(DEFAULT_DRIVERS) == 16


class TestCanonicalName:
    def test_strips_description(self):
        assert canonical_name("gecko (Gecko - Firefox)") == "gecko"

    def test_no_description(self):
        assert canonical_name("appium-device-farm") == "appium-device-farm"

    def test_scoped_package(self):
        assert canonical_name("@headspinio/appium-roku-driver (Roku)") == "@headspinio/appium-roku-driver"


class TestParseExtensionList:
    def test_keeps_prefixed_versioned_tokens(self):
        output = "\n".join([
            "✔ Listing available drivers",
            "appium-flutter-driver@2.4.0 [not installed]",
            "uiautomator2@3.0.1 [not installed]",
            "  appium-novawindows-driver@1.0.0",
            "appium-no-version-here",
        ])
        assert parse_extension_list(output) == [
            "appium-flutter-driver@2.4.0",
            "appium-novawindows-driver@1.0.0",
        ]

    def test_empty(self):
        assert parse_extension_list("") == []


class TestFetchAvailable:
    def test_command_failure_uses_defaults(self, mock_runner, capsys):
        mock_runner.set_failure(DRIVER_LIST)
        assert fetch_available(ItemKind.DRIVER, mock_runner) == DEFAULT_DRIVERS
        assert "Could not fetch driver list, using default list..." in capsys.readouterr().out

    def test_empty_parse_uses_defaults_silently(self, mock_runner, capsys):
        mock_runner.set_output(PLUGIN_LIST, "✔ Listing available plugins")
        assert fetch_available(ItemKind.PLUGIN, mock_runner) == DEFAULT_PLUGINS
        assert "Could not fetch" not in capsys.readouterr().out

    def test_live_names(self, mock_runner):
        mock_runner.set_output(DRIVER_LIST, "appium-flutter-driver@2.4.0 [not installed]")
        assert fetch_available(ItemKind.DRIVER, mock_runner) == ["appium-flutter-driver@2.4.0"]

    def test_fetch_disabled_by_config(self, mock_runner):
        config = InstallerConfig(fetch_catalog=False)
        assert fetch_available(ItemKind.DRIVER, mock_runner, config) == DEFAULT_DRIVERS
        assert mock_runner.call_count == 0

    def test_query_reports_failure_as_none(self, mock_runner):
        mock_runner.set_failure(DRIVER_LIST)
        assert query_live_catalog(ItemKind.DRIVER, mock_runner) is None

    def test_custom_appium_command(self, mock_runner):
        config = InstallerConfig(appium_command="npx appium")
        fetch_available(ItemKind.PLUGIN, mock_runner, config)
        assert mock_runner.commands == ["npx appium plugin list --installed=false"]


class TestFetchVersions:
    def test_failure_uses_defaults(self, mock_runner, capsys):
        mock_runner.set_failure(NPM_VERSIONS)
        assert fetch_versions(mock_runner) == DEFAULT_VERSIONS
        assert "Could not fetch versions" in capsys.readouterr().out

    def test_unparsable_output_uses_defaults(self, mock_runner):
        mock_runner.set_output(NPM_VERSIONS, "not json")
        assert fetch_versions(mock_runner) == DEFAULT_VERSIONS

    def test_recent_versions_newest_first(self, mock_runner):
        published = [f"2.{i}.0" for i in range(12)]
        mock_runner.set_output(NPM_VERSIONS, json.dumps(published))

        options = fetch_versions(mock_runner)
        assert options[0] == "latest (most recent)"
        assert options[1] == "3.0.0 (LTS)"
        assert options[2:] == ["2.11.0", "2.10.0", "2.9.0", "2.8.0", "2.7.0", "2.6.0", "2.5.0", "2.4.0"]

    def test_single_version_string(self, mock_runner):
        mock_runner.set_output(NPM_VERSIONS, json.dumps("3.0.0"))
        assert fetch_versions(mock_runner) == ["latest (most recent)", "3.0.0 (LTS)", "3.0.0"]

    def test_lts_pin_from_config(self, mock_runner):
        mock_runner.set_failure(NPM_VERSIONS)
        options = fetch_versions(mock_runner, InstallerConfig(lts_version="3.1.0"))
        assert options[1] == "3.1.0 (LTS)"


class TestResolveVersion:
    def test_latest(self):
        assert resolve_version("latest (most recent)") == "latest"

    def test_lts(self):
        assert resolve_version("3.0.0 (LTS)") == "3.0.0"
        assert resolve_version("3.0.0 (LTS)", lts_version="3.1.0") == "3.1.0"

    def test_plain_version(self):
        assert resolve_version("2.0.0") == "2.0.0"
