"""
End-to-end tests for the installation wizard, driven by a scripted
prompt and the mock adapter.
"""

import pytest

from appium_installer.adapters.mock import MockAdapter
from appium_installer.core.models.catalog import Platform
from appium_installer.core.models.session import Session
from appium_installer.core.services.wizard import InstallerWizard


class ExplodingAdapter(MockAdapter):
    def execute(self, context):
        raise RuntimeError("kaboom")


@pytest.fixture
def healthy_runner(mock_runner) -> MockAdapter:
    """Node/npm present, no live version list."""
    mock_runner.set_output("node --version", "v20.11.0")
    mock_runner.set_output("npm --version", "10.2.4")
    mock_runner.set_failure("npm view appium versions --json")
    return mock_runner


class TestFullRun:
    def test_install_flow(self, healthy_runner, make_ask, capsys):
        mock_runner = healthy_runner
        mock_runner.set_failure("appium driver install xcuitest")
        ask = make_ask(
            "1",        # Start Installation Process
            "3",        # Linux
            "2",        # 3.0.0 (LTS)
            "8, 15",    # xcuitest, appium-tizen-driver
            "2,25",     # images, appium-doctor
        )

        session = InstallerWizard(mock_runner, ask=ask, system="Linux").run()

        assert session is not None
        assert session.detected_platform == Platform.LINUX
        assert session.platform == Platform.LINUX
        assert session.appium_version == "3.0.0"
        assert session.selected_drivers == ["xcuitest", "appium-tizen-driver"]
        assert session.selected_plugins == ["images", "appium-doctor"]
        assert session.failed_installations == ["xcuitest"]

        commands = mock_runner.commands
        assert "npm install -g appium@3.0.0" in commands
        assert "npm install appium-tizen-driver" in commands
        assert "appium plugin install images" in commands
        assert not any("appium-doctor" in c for c in commands)

        out = capsys.readouterr().out
        assert "🔍 Detected platform: Linux" in out
        assert "✅ Selected drivers: xcuitest, appium-tizen-driver" in out
        assert "- xcuitest: npm install -g xcuitest" in out
        assert "🎯 Next Steps:" in out

    def test_install_order(self, healthy_runner, make_ask):
        ask = make_ask("1", "1", "1", "1", "1")
        InstallerWizard(healthy_runner, ask=ask, system="Windows").run()

        commands = healthy_runner.commands
        appium = commands.index("npm install -g appium@latest")
        driver = commands.index("appium driver install chromium")
        plugin = commands.index("appium plugin install execute-driver")
        verify = commands.index("appium --version")
        assert appium < driver < plugin < verify

    def test_empty_selections_still_verify(self, healthy_runner, make_ask, capsys):
        ask = make_ask("1", "3", "1", "", "")
        session = InstallerWizard(healthy_runner, ask=ask).run()

        assert session.selected_drivers == []
        assert session.selected_plugins == []
        assert "appium --version" in healthy_runner.commands
        assert "All installations completed successfully!" in capsys.readouterr().out


class TestHardGates:
    def test_requirements_not_met(self, mock_runner, make_ask, capsys):
        mock_runner.set_failure("node --version")
        session = InstallerWizard(mock_runner, ask=make_ask("1", "3")).run()

        assert "❌ System requirements not met." in capsys.readouterr().out
        assert session.results == []
        assert not any("install" in c for c in mock_runner.commands)

    def test_old_node_declined(self, mock_runner, make_ask):
        mock_runner.set_output("node --version", "v14.0.0")
        session = InstallerWizard(mock_runner, ask=make_ask("1", "3", "n")).run()
        assert session.appium_version is None
        assert session.results == []

    def test_node_install_failure(self, mock_runner, make_ask, capsys):
        mock_runner.set_failure("node --version")
        wizard = InstallerWizard(mock_runner, ask=make_ask(""))

        assert wizard.ensure_node(Session(platform=Platform.LINUX)) is False
        assert "Node.js installation failed. Please install manually." in capsys.readouterr().out


class TestMainMenu:
    def test_exit(self, mock_runner, make_ask, capsys):
        assert InstallerWizard(mock_runner, ask=make_ask("3")).run() is None
        out = capsys.readouterr().out
        assert "Thank you for using Appium Installation Application!" in out
        assert mock_runner.call_count == 0

    def test_docs_return_to_menu(self, mock_runner, make_ask, capsys):
        ask = make_ask(
            "2",    # View documentation
            "1",    # Appium 3.0 Overview
            "",     # Press Enter
            "11",   # Back to Main Menu
            "3",    # Exit
        )
        assert InstallerWizard(mock_runner, ask=ask).run() is None

        out = capsys.readouterr().out
        assert out.count("🚀 Appium Installation Application v3.0") == 2
        assert "📖 Appium 3.0 Overview" in out
        assert "Thank you for using" in out

    def test_invalid_menu_choice_reprompts(self, mock_runner, make_ask, capsys):
        assert InstallerWizard(mock_runner, ask=make_ask("7", "x", "3")).run() is None
        assert capsys.readouterr().out.count("Invalid selection. Please try again.") == 2


class TestErrors:
    def test_input_closed(self, mock_runner, make_ask, capsys):
        assert InstallerWizard(mock_runner, ask=make_ask("1")).run() is None
        assert "Installation aborted" in capsys.readouterr().out

    def test_unexpected_error_is_reported(self, make_ask, capsys):
        wizard = InstallerWizard(ExplodingAdapter(), ask=make_ask("1", "1"))
        assert wizard.run() is None
        assert "❌ Error: kaboom" in capsys.readouterr().out
