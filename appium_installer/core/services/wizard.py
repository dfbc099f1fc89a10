"""
Installation wizard — the main menu and the install run.

The install run is a fixed sequence of steps sharing one ``Session``:

    platform-select → requirements-check → runtime-install →
    version-select → appium-install → driver-select → driver-install →
    plugin-select → plugin-install → verify → report → next-steps

Only ``requirements-check`` and ``runtime-install`` can stop the run
(a step returning False). Individual install failures are recorded on
the session and reported at the end.

The main menu is a loop: viewing the documentation comes back to it
without re-entering ``run``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.catalog import ItemKind, Platform
from appium_installer.core.models.config import InstallerConfig
from appium_installer.core.models.session import Session
from appium_installer.core.services.catalog import (
    canonical_name,
    fetch_available,
    fetch_versions,
    resolve_version,
)
from appium_installer.core.services.docs import show_detailed_documentation
from appium_installer.core.services.installer import install_appium, install_batch
from appium_installer.core.services.platform_probe import (
    SELECTABLE_PLATFORMS,
    detect_platform,
)
from appium_installer.core.services.prompts import Ask, select_many, select_one
from appium_installer.core.services.reporter import (
    show_failed_installations,
    show_next_steps,
    verify_installation,
)
from appium_installer.core.services.requirements import (
    check_node_installation,
    check_system_requirements,
    install_node,
)

logger = logging.getLogger(__name__)

START_INSTALLATION = "Start Installation Process"
VIEW_DOCUMENTATION = "View Detailed Installation Documentation"
EXIT = "Exit"
MAIN_MENU: list[str] = [START_INSTALLATION, VIEW_DOCUMENTATION, EXIT]

Step = Callable[[Session], bool | None]


class InstallerWizard:
    """Interactive Appium installer bound to one command runner."""

    def __init__(
        self,
        runner: Adapter,
        config: InstallerConfig | None = None,
        ask: Ask | None = None,
        system: str | None = None,
    ):
        self.runner = runner
        self.config = config or InstallerConfig()
        self.ask = ask
        self._system = system  # override for platform.system()

    # ── Entry points ────────────────────────────────────────────

    def run(self) -> Session | None:
        """Show the main menu until the user installs or exits.

        Returns the install session, or None if the user exited. Never
        raises: unexpected errors are printed, and Ctrl-C / EOF end the
        run quietly.
        """
        try:
            while True:
                self.show_banner()
                choice = self.show_main_menu()

                if choice == START_INSTALLATION:
                    return self.install()
                if choice == VIEW_DOCUMENTATION:
                    show_detailed_documentation(self.runner, self.config, ask=self.ask)
                    continue

                click.echo("\n👋 Thank you for using Appium Installation Application!")
                return None
        except (click.Abort, KeyboardInterrupt, EOFError):
            click.echo("\n👋 Installation aborted.")
        except Exception as e:
            logger.exception("Wizard failed")
            click.echo(f"\n❌ Error: {e}")
        return None

    def install(self) -> Session:
        """Run every install step in order; stop only on a hard gate."""
        session = Session()
        steps: list[tuple[str, Step]] = [
            ("platform-select", self.select_platform),
            ("requirements-check", self.check_requirements),
            ("runtime-install", self.ensure_node),
            ("version-select", self.select_appium_version),
            ("appium-install", self.install_appium),
            ("driver-select", self.select_drivers),
            ("driver-install", self.install_drivers),
            ("plugin-select", self.select_plugins),
            ("plugin-install", self.install_plugins),
            ("verify", self.verify),
            ("report", self.report),
            ("next-steps", self.next_steps),
        ]
        for name, step in steps:
            logger.debug("Wizard step: %s", name)
            if step(session) is False:
                logger.info("Wizard stopped at %s", name)
                break
        return session

    # ── Menu ────────────────────────────────────────────────────

    def show_banner(self) -> None:
        click.echo("🚀 Appium Installation Application v3.0")
        click.echo("======================================")
        click.echo("\n📚 About Appium 3.0:")
        click.echo("• Appium 3.0 is the latest version")
        click.echo("• WebDriver BiDi protocol support")
        click.echo("• Advanced plugin system")
        click.echo("• Better performance and security")
        click.echo("• Detailed info: https://appium.io/docs/en/3.0/")

    def show_main_menu(self) -> str:
        click.echo("\n📋 Main Menu:")
        return select_one(MAIN_MENU, "What would you like to do?", ask=self.ask)

    # ── Steps ───────────────────────────────────────────────────

    def select_platform(self, session: Session) -> None:
        session.detected_platform = detect_platform(self._system)
        click.echo(f"\n🔍 Detected platform: {session.detected_platform}")

        chosen = select_one(SELECTABLE_PLATFORMS, "Which platform are you using?", ask=self.ask)
        session.platform = Platform(chosen)
        click.echo(f"✅ Selected platform: {session.platform}")

    def check_requirements(self, session: Session) -> bool:
        if not check_system_requirements(self.runner, self.config, ask=self.ask):
            click.echo("❌ System requirements not met.")
            return False
        return True

    def ensure_node(self, session: Session) -> bool:
        if check_node_installation(self.runner, self.config):
            return True

        install_node(session.platform, self.runner, ask=self.ask)
        if not check_node_installation(self.runner, self.config):
            click.echo("❌ Node.js installation failed. Please install manually.")
            return False
        return True

    def select_appium_version(self, session: Session) -> None:
        options = fetch_versions(self.runner, self.config)
        choice = select_one(options, "Which Appium version would you like to install?", ask=self.ask)
        session.appium_version = resolve_version(choice, self.config.lts_version)
        click.echo(f"✅ Selected Appium version: {session.appium_version}")

    def install_appium(self, session: Session) -> None:
        install_appium(session, self.runner, self.config)

    def select_drivers(self, session: Session) -> None:
        session.selected_drivers = self._select_extensions(ItemKind.DRIVER)
        click.echo(f"✅ Selected drivers: {', '.join(session.selected_drivers)}")

    def install_drivers(self, session: Session) -> None:
        click.echo("\n🔧 Installing Appium drivers...")
        install_batch(session.selected_drivers, ItemKind.DRIVER, session, self.runner, self.config)

    def select_plugins(self, session: Session) -> None:
        session.selected_plugins = self._select_extensions(ItemKind.PLUGIN)
        click.echo(f"✅ Selected plugins: {', '.join(session.selected_plugins)}")

    def install_plugins(self, session: Session) -> None:
        click.echo("\n🔌 Installing Appium plugins...")
        install_batch(session.selected_plugins, ItemKind.PLUGIN, session, self.runner, self.config)

    def verify(self, session: Session) -> None:
        verify_installation(self.runner, self.config)

    def report(self, session: Session) -> None:
        show_failed_installations(session)

    def next_steps(self, session: Session) -> None:
        show_next_steps(session, self.runner, self.config)

    # ── Helpers ─────────────────────────────────────────────────

    def _select_extensions(self, kind: ItemKind) -> list[str]:
        entries = fetch_available(kind, self.runner, self.config)
        picked = select_many(
            entries,
            f"Which Appium {kind.value}s would you like to install?",
            ask=self.ask,
        )
        return [canonical_name(entry) for entry in picked]
