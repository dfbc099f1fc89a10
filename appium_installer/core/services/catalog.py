"""
Catalog tables — known drivers, plugins and Appium versions.

Each list is tried live first (``appium driver list --installed=false``,
``npm view appium versions --json``) and falls back to the built-in
table below when the query fails or yields nothing.

Entries are display strings: ``"<canonical name> (<description>)"``.
The tier comments are documentation only; the install category of an
entry is always recomputed by ``core.services.classifier``.
"""

from __future__ import annotations

import json
import logging

import click

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.catalog import ItemKind
from appium_installer.core.models.config import InstallerConfig

logger = logging.getLogger(__name__)


# ── Static tables ───────────────────────────────────────────────

DEFAULT_DRIVERS: list[str] = [
    # Official Appium drivers
    "chromium (Chromium - Chrome, Edge)",
    "espresso (Espresso - Android Native)",
    "gecko (Gecko - Firefox)",
    "mac2 (Mac2 - macOS Native)",
    "safari (Safari - Safari Browser)",
    "uiautomator2 (UiAutomator2 - Android, TV, Wear)",
    "windows (Windows - Windows Native)",
    "xcuitest (XCUITest - iOS, iPadOS, tvOS)",
    # Third-party drivers
    "appium-flutter-driver (Flutter - iOS/Android)",
    "appium-flutter-integration-driver (Flutter Integration)",
    "appium-lg-webos-driver (LG WebOS - LG TV)",
    "appium-novawindows-driver (NovaWindows - Windows)",
    "@headspinio/appium-roku-driver (Roku - Roku Channels)",
    "appium-tizen-tv-driver (TizenTV - Tizen TV)",
    # Legacy drivers (Appium 1 only)
    "appium-tizen-driver (Tizen - Legacy, Appium 1 only)",
    "appium-youiengine-driver (You.i Engine - Legacy, Appium 1 only)",
]

DEFAULT_PLUGINS: list[str] = [
    # Official Appium plugins
    "execute-driver (Execute Driver - Official)",
    "images (Images - Official)",
    "inspector (Inspector - Official)",
    "relaxed-caps (Relaxed Caps - Official)",
    "storage (Storage - Official)",
    "universal-xml (Universal XML - Official)",
    # Third-party plugins
    "appium-altunity-plugin (AltUnity - Unity Games)",
    "appium-device-farm (Device Farm - Device Management)",
    "appium-gestures-plugin (Gestures - W3C Actions)",
    "appium-interceptor (Interceptor - API Mocking)",
    "appium-ocr-plugin (OCR - Text Recognition)",
    "appium-reporter-plugin (Reporter - HTML Reports)",
    "appium-wait-plugin (Wait - Timeout Management)",
    # Client libraries
    "appium-dotnet-client (.NET)",
    "appium-python-client (Python)",
    "appium-java-client (Java)",
    "appium-javascript-client (JavaScript)",
    "appium-ruby-client (Ruby)",
    "appium-php-client (PHP)",
    "appium-csharp-client (C#)",
    "appium-go-client (Go)",
    # Tools
    "appium-selenium-ide (Selenium IDE)",
    "appium-inspector (Appium Inspector)",
    # Official tools
    "appium-inspector (Appium Inspector - Official)",
    # Extension tools
    "appium-doctor (Appium Doctor - Environment Validation)",
    # Other tools
    "appium-installer (Appium Installer - Setup Tool)",
]

LATEST_OPTION = "latest (most recent)"
LATEST_MARKER = "(most recent)"
LTS_MARKER = "(LTS)"

DEFAULT_VERSIONS: list[str] = [
    LATEST_OPTION,
    "3.0.0 (LTS)",
    "2.0.0",
    "1.22.3",
    "1.22.2",
    "1.22.1",
    "1.22.0",
]

# Live names must carry this prefix to be offered.
LIVE_NAME_PREFIX = "appium-"


def default_catalog(kind: ItemKind) -> list[str]:
    """Return a fresh copy of the built-in list for ``kind``."""
    if kind == ItemKind.DRIVER:
        return list(DEFAULT_DRIVERS)
    return list(DEFAULT_PLUGINS)


def canonical_name(entry: str) -> str:
    """Strip a ``(description)`` suffix: ``"gecko (Gecko)"`` -> ``"gecko"``."""
    return entry.split("(", 1)[0].strip()


# ── Live queries ────────────────────────────────────────────────


def parse_extension_list(output: str) -> list[str]:
    """Pull extension names out of ``appium <kind> list`` text output.

    Keeps the first whitespace-delimited token of each line that
    contains an ``@`` version marker, then only tokens starting with
    ``appium-``.
    """
    names: list[str] = []
    for line in output.splitlines():
        if "@" not in line:
            continue
        parts = line.strip().split()
        if not parts:
            continue
        token = parts[0]
        if token.startswith(LIVE_NAME_PREFIX):
            names.append(token)
    return names


def query_live_catalog(
    kind: ItemKind,
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> list[str] | None:
    """Names from ``appium <kind> list --installed=false``; None if it failed."""
    config = config or InstallerConfig()
    command = f"{config.appium_command} {kind.value} list --installed=false"
    receipt = runner.run(
        command,
        action_id=f"{kind.value}-list",
        timeout=config.probe_timeout,
    )
    if receipt.failed:
        logger.info("Live %s list unavailable: %s", kind.value, receipt.error)
        return None
    return parse_extension_list(receipt.output)


def fetch_available(
    kind: ItemKind,
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> list[str]:
    """List installable drivers or plugins, live or from the built-in table."""
    config = config or InstallerConfig()
    if not config.fetch_catalog:
        return default_catalog(kind)

    click.echo(f"📡 Fetching available {kind.value}s...")
    names = query_live_catalog(kind, runner, config)
    if names is None:
        click.echo(f"⚠️  Could not fetch {kind.value} list, using default list...")
        return default_catalog(kind)
    if not names:
        logger.debug("Live %s list was empty, using built-in catalog", kind.value)
        return default_catalog(kind)
    return names


def fetch_versions(
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> list[str]:
    """Version menu: latest, the LTS pin, then recent published versions."""
    config = config or InstallerConfig()

    click.echo("📡 Fetching Appium versions...")
    receipt = runner.run(
        f"{config.npm_command} view appium versions --json",
        action_id="appium-versions",
        timeout=config.probe_timeout,
    )

    versions: list[str] = []
    if receipt.ok:
        try:
            data = json.loads(receipt.output)
        except ValueError:
            data = None
        if isinstance(data, list):
            versions = [str(v) for v in data]
        elif isinstance(data, str):
            versions = [data]

    if not versions:
        logger.info("Version list unavailable: %s", receipt.error or "unparsable output")
        click.echo("⚠️  Could not fetch versions, using default list...")
        options = list(DEFAULT_VERSIONS)
        options[1] = f"{config.lts_version} {LTS_MARKER}"
        return options

    recent = list(reversed(versions[-10:]))
    return [
        LATEST_OPTION,
        f"{config.lts_version} {LTS_MARKER}",
        *recent[: config.recent_versions],
    ]


def resolve_version(option: str, lts_version: str = "3.0.0") -> str:
    """Turn a version menu entry into the string passed to npm."""
    if LATEST_MARKER in option:
        return "latest"
    if LTS_MARKER in option:
        return lts_version
    return option
