"""
Runtime prerequisites — Node.js and npm.

These are the only hard gates in the wizard: if either check fails the
run stops before anything is installed.
"""

from __future__ import annotations

import logging
import re

import click

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.catalog import Platform
from appium_installer.core.models.config import InstallerConfig
from appium_installer.core.services.prompts import Ask, confirm, pause

logger = logging.getLogger(__name__)

_NODE_MAJOR_RE = re.compile(r"v?(\d+)")

_INSTALL_DONE_PROMPT = "Press Enter after installation is complete..."


def parse_node_major(version: str) -> int | None:
    """``"v18.19.0"`` -> 18. None when the string carries no number."""
    match = _NODE_MAJOR_RE.match(version.strip())
    return int(match.group(1)) if match else None


def check_system_requirements(
    runner: Adapter,
    config: InstallerConfig | None = None,
    ask: Ask | None = None,
) -> bool:
    """Node.js (with a minimum major version) and npm must be present.

    An old Node.js only passes if the user explicitly answers ``y``.
    """
    config = config or InstallerConfig()
    click.echo("\n🔍 Checking system requirements...")

    node = runner.run("node --version", action_id="node-version", timeout=config.probe_timeout)
    if node.failed:
        click.echo("❌ Node.js not found")
        return False

    node_version = node.output.strip()
    major = parse_node_major(node_version)
    if major is not None and major < config.min_node_major:
        click.echo(
            f"⚠️  Node.js {config.min_node_major}+ recommended. Current version: {node_version}"
        )
        if not confirm("Do you want to continue? (y/n):", ask=ask):
            logger.info("User declined to continue with Node.js %s", node_version)
            return False
    else:
        click.echo(f"✅ Node.js version suitable: {node_version}")

    npm = runner.run(
        f"{config.npm_command} --version",
        action_id="npm-version",
        timeout=config.probe_timeout,
    )
    if npm.failed:
        click.echo("❌ NPM not found")
        return False
    click.echo(f"✅ NPM version: {npm.output.strip()}")

    return True


def check_node_installation(runner: Adapter, config: InstallerConfig | None = None) -> bool:
    """Report whether ``node`` answers ``--version``."""
    config = config or InstallerConfig()
    receipt = runner.run("node --version", action_id="node-version", timeout=config.probe_timeout)
    if receipt.ok:
        click.echo(f"✅ Node.js already installed: {receipt.output.strip()}")
        return True
    click.echo("❌ Node.js not installed")
    return False


def install_node(
    platform: Platform,
    runner: Adapter,
    ask: Ask | None = None,
) -> None:
    """Install Node.js LTS, or walk the user through doing it by hand.

    Only macOS is automated (Homebrew). Everything else prints steps and
    waits for the user to confirm they are done.
    """
    click.echo("\n📦 Starting Node.js LTS installation...")

    if platform == Platform.WINDOWS:
        click.echo("Node.js installation for Windows:")
        click.echo("1. Download LTS version from https://nodejs.org")
        click.echo("2. Run the downloaded .msi file")
        click.echo("3. Restart terminal after installation")
        pause(_INSTALL_DONE_PROMPT, ask=ask)
    elif platform == Platform.MACOS:
        click.echo("Installing Node.js with Homebrew...")
        receipt = runner.run("brew install node", action_id="install:node", stream=True)
        if receipt.failed:
            logger.info("brew install node failed: %s", receipt.error)
            click.echo("Homebrew not found. Manual installation required:")
            click.echo("Download LTS version from https://nodejs.org")
            pause(_INSTALL_DONE_PROMPT, ask=ask)
    else:
        click.echo("Node.js installation for Linux:")
        click.echo("Ubuntu/Debian: sudo apt update && sudo apt install nodejs npm")
        click.echo("CentOS/RHEL: sudo yum install nodejs npm")
        pause(_INSTALL_DONE_PROMPT, ask=ask)
