"""
Platform probe — map the host OS to a Platform value.

The result is only a suggestion shown to the user; the wizard always
asks which platform to install for.
"""

from __future__ import annotations

import logging
import platform as _platform

from appium_installer.core.models.catalog import Platform

logger = logging.getLogger(__name__)

_SYSTEM_MAP: dict[str, Platform] = {
    "Windows": Platform.WINDOWS,
    "Darwin": Platform.MACOS,
    "Linux": Platform.LINUX,
}

# Choices offered to the user, in menu order.
SELECTABLE_PLATFORMS: list[Platform] = [
    Platform.WINDOWS,
    Platform.MACOS,
    Platform.LINUX,
]


def detect_platform(system: str | None = None) -> Platform:
    """Map ``platform.system()`` (or the given name) to a Platform."""
    name = system if system is not None else _platform.system()
    detected = _SYSTEM_MAP.get(name, Platform.UNKNOWN)
    logger.debug("platform.system()=%r -> %s", name, detected)
    return detected
