"""
Classifier — decide the install category of a canonical name.

Matching is substring containment of a keyword within the name, so a
name can hit several rule sets. Rules are therefore an explicit ordered
list and the first match wins:

- drivers: legacy → third-party → official → OTHER_DRIVER.
  ``appium-novawindows-driver`` contains the official keyword
  ``windows`` but is caught by the third-party rule first.
- plugins: official plugin → third-party → official tool → extension
  tool → other tool → CLIENT_LIBRARY.
  ``appium-inspector`` matches the official-tool keyword but also
  contains the official plugin keyword ``inspector``, so it installs
  through ``appium plugin install``.

Every name gets exactly one category; unknown names fall through to the
kind's default, which installs as a global npm package.
"""

from __future__ import annotations

from appium_installer.core.models.catalog import Category, ItemKind

OFFICIAL_DRIVERS: tuple[str, ...] = (
    "chromium", "espresso", "gecko", "mac2",
    "safari", "uiautomator2", "windows", "xcuitest",
)
THIRD_PARTY_DRIVERS: tuple[str, ...] = (
    "appium-flutter-driver",
    "appium-flutter-integration-driver",
    "appium-lg-webos-driver",
    "appium-novawindows-driver",
    "@headspinio/appium-roku-driver",
    "appium-tizen-tv-driver",
)
LEGACY_DRIVERS: tuple[str, ...] = (
    "appium-tizen-driver",
    "appium-youiengine-driver",
)

OFFICIAL_PLUGINS: tuple[str, ...] = (
    "execute-driver", "images", "inspector",
    "relaxed-caps", "storage", "universal-xml",
)
THIRD_PARTY_PLUGINS: tuple[str, ...] = (
    "appium-altunity-plugin",
    "appium-device-farm",
    "appium-gestures-plugin",
    "appium-interceptor",
    "appium-ocr-plugin",
    "appium-reporter-plugin",
    "appium-wait-plugin",
)
OFFICIAL_TOOLS: tuple[str, ...] = ("appium-inspector",)
EXTENSION_TOOLS: tuple[str, ...] = ("appium-doctor",)
OTHER_TOOLS: tuple[str, ...] = ("appium-installer",)

DRIVER_RULES: list[tuple[Category, tuple[str, ...]]] = [
    (Category.LEGACY_DRIVER, LEGACY_DRIVERS),
    (Category.THIRD_PARTY_DRIVER, THIRD_PARTY_DRIVERS),
    (Category.OFFICIAL_DRIVER, OFFICIAL_DRIVERS),
]

PLUGIN_RULES: list[tuple[Category, tuple[str, ...]]] = [
    (Category.OFFICIAL_PLUGIN, OFFICIAL_PLUGINS),
    (Category.THIRD_PARTY_PLUGIN, THIRD_PARTY_PLUGINS),
    (Category.OFFICIAL_TOOL, OFFICIAL_TOOLS),
    (Category.EXTENSION_TOOL, EXTENSION_TOOLS),
    (Category.OTHER_TOOL, OTHER_TOOLS),
]

DEFAULT_CATEGORY: dict[ItemKind, Category] = {
    ItemKind.DRIVER: Category.OTHER_DRIVER,
    ItemKind.PLUGIN: Category.CLIENT_LIBRARY,
}


def rules_for(kind: ItemKind) -> list[tuple[Category, tuple[str, ...]]]:
    """Ordered (category, keywords) rules for ``kind``."""
    return DRIVER_RULES if kind == ItemKind.DRIVER else PLUGIN_RULES


def classify(name: str, kind: ItemKind) -> Category:
    """Return the first category whose keyword occurs in ``name``."""
    for category, keywords in rules_for(kind):
        if any(keyword in name for keyword in keywords):
            return category
    return DEFAULT_CATEGORY[kind]
