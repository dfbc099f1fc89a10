"""
Appium Installer — CLI entrypoint.

Usage:
    appium-installer                # interactive wizard
    appium-installer docs --list
    appium-installer check android
    python -m appium_installer.main --help
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from appium_installer.core.observability.logging_config import setup_logging

from appium_installer import __version__


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="appium-installer")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to an installer YAML config (default: $APPIUM_INSTALLER_CONFIG).",
)
@click.option("--dry-run", is_flag=True, help="Print install commands instead of running them.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    dry_run: bool,
) -> None:
    """Appium Installer — set up Appium, its drivers and plugins."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["dry_run"] = dry_run

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("APPIUM_INSTALLER_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("APPIUM_INSTALLER_LOG_FILE"),
        log_file_level=os.environ.get("APPIUM_INSTALLER_LOG_FILE_LEVEL"),
    )

    # ── Config + runner ─────────────────────────────────────────
    from appium_installer.adapters.shell.command import ShellCommandAdapter
    from appium_installer.core.config.loader import ConfigError, load_config

    try:
        ctx.obj["config"] = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    ctx.obj.setdefault("runner", ShellCommandAdapter(dry_run=dry_run, echo=click.echo))

    if ctx.invoked_subcommand is None:
        ctx.invoke(wizard)


@cli.command()
@click.pass_context
def wizard(ctx: click.Context) -> None:
    """Run the interactive installation wizard (default)."""
    from appium_installer.core.services.wizard import InstallerWizard

    InstallerWizard(ctx.obj["runner"], ctx.obj["config"], ask=ctx.obj.get("ask")).run()


@cli.command()
@click.pass_context
def sysinfo(ctx: click.Context) -> None:
    """Print system information (versions, memory, disk, env, network)."""
    from appium_installer.core.services.sysinfo import show_system_information

    show_system_information(ctx.obj["runner"], ctx.obj["config"])


# ── Register sub-command groups from appium_installer/ui/cli/ ─────

from appium_installer.ui.cli.catalog import catalog
from appium_installer.ui.cli.check import check
from appium_installer.ui.cli.docs import docs

cli.add_command(docs)
cli.add_command(check)
cli.add_command(catalog)


if __name__ == "__main__":
    cli()
