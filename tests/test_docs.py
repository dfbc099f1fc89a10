"""
Tests for the documentation viewer.
"""

from appium_installer.core.services.docs import (
    BACK_TO_MAIN_MENU,
    DOC_SECTIONS,
    find_section,
    section_titles,
    show_detailed_documentation,
    show_section,
)


class TestSections:
    def test_menu_ends_with_back(self):
        titles = section_titles()
        assert titles[0] == "Appium 3.0 Overview"
        assert titles[-1] == BACK_TO_MAIN_MENU
        assert len(titles) == len(DOC_SECTIONS) + 1

    def test_find_exact_and_prefix(self):
        assert find_section("troubleshooting") == "Troubleshooting"
        assert find_section("node") == "Node.js Installation"
        assert find_section("  Plugin ") == "Plugin Installation"
        assert find_section("zzz") is None

    def test_show_static_section(self, mock_runner, capsys):
        show_section("Driver Installation", mock_runner)
        out = capsys.readouterr().out
        assert "📖 Driver Installation" in out
        assert mock_runner.call_count == 0

    def test_show_live_section(self, mock_runner, capsys):
        show_section("System Information", mock_runner)
        assert "📊 System Information" in capsys.readouterr().out
        assert mock_runner.call_count > 0


class TestViewer:
    def test_loops_until_back(self, mock_runner, make_ask, capsys):
        ask = make_ask("1", "", "10", "", "11")
        show_detailed_documentation(mock_runner, ask=ask)
        out = capsys.readouterr().out
        assert "📖 Appium 3.0 Overview" in out
        assert "📖 Troubleshooting" in out
        assert ask.answers == []
