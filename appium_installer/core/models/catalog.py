"""
Catalog enums — platforms, extension kinds and install categories.

A category decides which install command template applies to an item.
Categories are computed by ``core.services.classifier``; they are never
stored on the catalog entries themselves.
"""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    """Host platforms the wizard knows how to talk about."""

    WINDOWS = "Windows"
    MACOS = "macOS"
    LINUX = "Linux"
    UNKNOWN = "Unknown"


class ItemKind(StrEnum):
    """Kind of Appium extension in a catalog."""

    DRIVER = "driver"
    PLUGIN = "plugin"


class Category(StrEnum):
    """Install category — one command template per value."""

    # drivers
    OFFICIAL_DRIVER = "official-driver"
    THIRD_PARTY_DRIVER = "third-party-driver"
    LEGACY_DRIVER = "legacy-driver"
    OTHER_DRIVER = "other-driver"

    # plugins and tools
    OFFICIAL_PLUGIN = "official-plugin"
    THIRD_PARTY_PLUGIN = "third-party-plugin"
    OFFICIAL_TOOL = "official-tool"
    EXTENSION_TOOL = "extension-tool"
    OTHER_TOOL = "other-tool"
    CLIENT_LIBRARY = "client-library"
