"""
Installer — one command per selected item, failures recorded not raised.

``INSTALL_TEMPLATES`` is the single table mapping a category to its
command template. ``install_item`` runs it with the terminal attached
and returns an ``InstallResult``; ``install_batch`` walks a selection,
records every result on the session, and never stops early.
"""

from __future__ import annotations

import logging

import click

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.catalog import Category, ItemKind
from appium_installer.core.models.config import InstallerConfig
from appium_installer.core.models.session import InstallResult, Session
from appium_installer.core.services.classifier import classify

logger = logging.getLogger(__name__)


# Command template per category. "{appium}" / "{npm}" come from the
# config, "{name}" is the canonical item name. None = nothing to run.
INSTALL_TEMPLATES: dict[Category, str | None] = {
    Category.OFFICIAL_DRIVER:    "{appium} driver install {name}",
    Category.THIRD_PARTY_DRIVER: "{appium} driver install --source=npm {name}",
    Category.LEGACY_DRIVER:      "{npm} install {name}",
    Category.OTHER_DRIVER:       "{npm} install -g {name}",
    Category.OFFICIAL_PLUGIN:    "{appium} plugin install {name}",
    Category.THIRD_PARTY_PLUGIN: "{appium} plugin install --source=npm {name}",
    Category.OFFICIAL_TOOL:      "{npm} install -g {name}",
    Category.EXTENSION_TOOL:     None,
    Category.OTHER_TOOL:         "{npm} install -g {name}",
    Category.CLIENT_LIBRARY:     "{npm} install -g {name}",
}


def build_install_command(
    name: str,
    category: Category,
    config: InstallerConfig | None = None,
) -> str | None:
    """Command string for ``name`` in ``category``; None means run nothing."""
    config = config or InstallerConfig()
    template = INSTALL_TEMPLATES[category]
    if template is None:
        return None
    return template.format(
        appium=config.appium_command,
        npm=config.npm_command,
        name=name,
    )


def install_item(
    name: str,
    category: Category,
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> InstallResult:
    """Install one item. Never raises; a failed command is a failed result."""
    config = config or InstallerConfig()

    if category == Category.LEGACY_DRIVER:
        click.echo(f"⚠️  {name} is a legacy driver and only compatible with Appium 1!")
    elif category == Category.EXTENSION_TOOL:
        click.echo(f"ℹ️  {name} is integrated with Appium CLI")
        click.echo("   Usage: appium doctor [driver|plugin] <extension-name>")

    command = build_install_command(name, category, config)
    if command is None:
        return InstallResult(name=name, category=category)

    logger.debug("Installing %s (%s): %s", name, category, command)
    receipt = runner.run(
        command,
        action_id=f"install:{name}",
        stream=True,
        timeout=config.install_timeout,
    )
    if receipt.failed:
        logger.warning("Install of %s failed: %s", name, receipt.error)
        return InstallResult(
            name=name,
            category=category,
            command=command,
            status="failed",
            error=receipt.error,
        )
    return InstallResult(name=name, category=category, command=command)


def install_batch(
    names: list[str],
    kind: ItemKind,
    session: Session,
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> list[InstallResult]:
    """Install each selected name in order, recording results on the session."""
    results: list[InstallResult] = []
    for name in names:
        click.echo(f"\n📦 Installing {name}...")
        result = install_item(name, classify(name, kind), runner, config)
        session.record(result)
        results.append(result)

        if result.ok:
            click.echo(f"✅ {name} installed successfully")
        else:
            click.echo(f"❌ {name} installation failed")
    return results


def install_appium(
    session: Session,
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> InstallResult:
    """Install the Appium server at the session's selected version."""
    config = config or InstallerConfig()
    version = session.appium_version or "latest"

    click.echo("\n🚀 Starting Appium installation...")
    command = f"{config.npm_command} install -g appium@{version}"
    click.echo(f"Running command: {command}")

    receipt = runner.run(
        command,
        action_id="install:appium",
        stream=True,
        timeout=config.install_timeout,
    )
    if receipt.failed:
        logger.warning("Appium install failed: %s", receipt.error)
        click.echo("❌ Appium installation failed")
        result = InstallResult(
            name=f"Appium {version}",
            command=command,
            status="failed",
            error=receipt.error,
        )
    else:
        click.echo("✅ Appium installed successfully")
        result = InstallResult(name=f"Appium {version}", command=command)

    session.record(result)
    return result
