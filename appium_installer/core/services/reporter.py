"""
Reporter — verification, failure summary and next steps.

The remediation hint for a failed item uses its own three-way rule
(``Appium`` prefix / contains ``driver`` / anything else), independent
of ``core.services.classifier``. The two rules disagree on some names.
"""

from __future__ import annotations

import logging

import click

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.config import InstallerConfig
from appium_installer.core.models.session import Session
from appium_installer.core.services.platform_checks import run_platform_checks

logger = logging.getLogger(__name__)


def verify_installation(runner: Adapter, config: InstallerConfig | None = None) -> None:
    """Best-effort ``appium --version`` and ``appium driver list``."""
    config = config or InstallerConfig()
    appium = config.appium_command
    click.echo("\n🔍 Verifying installation...")

    version = runner.run(f"{appium} --version", action_id="appium-version", timeout=config.probe_timeout)
    if version.ok:
        click.echo(f"✅ Appium version: {version.output.strip()}")
    else:
        click.echo("❌ Could not verify Appium installation")

    drivers = runner.run(f"{appium} driver list", action_id="driver-list", timeout=config.probe_timeout)
    if drivers.ok:
        click.echo("\n📋 Installed drivers:")
        click.echo(drivers.output)
    else:
        click.echo("❌ Could not get driver list")


def remediation_hint(item: str, appium_version: str | None) -> str:
    """Manual install line for one failed item."""
    if item.startswith("Appium"):
        return f"- Appium: npm install -g appium@{appium_version}"
    if "driver" in item:
        return f"- {item}: appium driver install {item}"
    return f"- {item}: npm install -g {item}"


def show_failed_installations(session: Session) -> None:
    """List failures with a manual fix each, or celebrate a clean run."""
    if not session.failed_installations:
        click.echo("\n🎉 All installations completed successfully!")
        return

    logger.info("%d installation(s) failed", len(session.failed_installations))
    click.echo("\n⚠️  Failed installations:")
    for item in session.failed_installations:
        click.echo(f"❌ {item}")

    click.echo("\n🔧 Manual installation instructions:")
    for item in session.failed_installations:
        click.echo(remediation_hint(item, session.appium_version))


def show_next_steps(
    session: Session,
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> None:
    """Pointers for what to do now, then the platform environment checks."""
    config = config or InstallerConfig()
    click.echo("\n🎯 Next Steps:")
    click.echo("1. Start Appium server: appium server")
    click.echo("2. Start writing tests: https://appium.io/docs/en/3.0/quickstart/")
    click.echo("3. Use Appium Inspector: appium inspector")
    click.echo("4. Documentation: https://appium.io/docs/en/3.0/")

    run_platform_checks(session.platform, runner, timeout=config.probe_timeout)
