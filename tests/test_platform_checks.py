"""
Tests for Android and iOS environment checks.
"""

from appium_installer.core.models.catalog import Platform
from appium_installer.core.services.platform_checks import (
    WDA_SEARCH,
    android_home,
    check_android_requirements,
    check_ios_requirements,
    has_attached_device,
    report_android,
    run_platform_checks,
)

ADB_WITH_DEVICE = "List of devices attached\nemulator-5554\tdevice\n"
ADB_UNAUTHORIZED = "List of devices attached\nR58M12345\tunauthorized\n"


class TestAndroid:
    def test_android_home_fallback(self, monkeypatch):
        assert android_home() is None
        monkeypatch.setenv("ANDROID_SDK_ROOT", "/opt/sdk")
        assert android_home() == "/opt/sdk"
        monkeypatch.setenv("ANDROID_HOME", "/home/me/Android/Sdk")
        assert android_home() == "/home/me/Android/Sdk"

    def test_device_detection(self):
        assert has_attached_device(ADB_WITH_DEVICE)
        assert not has_attached_device(ADB_UNAUTHORIZED)
        assert not has_attached_device("List of devices attached\n")

    def test_ready(self, mock_runner, monkeypatch):
        monkeypatch.setenv("ANDROID_HOME", "/sdk")
        monkeypatch.setenv("JAVA_HOME", "/jdk")
        mock_runner.set_output("adb devices", ADB_WITH_DEVICE)

        reqs = check_android_requirements(mock_runner)
        assert reqs.ready

    def test_nothing_set(self, mock_runner, capsys):
        mock_runner.set_failure("adb devices")
        reqs = check_android_requirements(mock_runner)
        assert not reqs.android_sdk
        assert not reqs.java_jdk
        assert not reqs.adb_devices
        out = capsys.readouterr().out
        assert "ANDROID_HOME environment variable not set" in out
        assert "ADB command could not be executed" in out

    def test_report_prints_setup_guide(self, mock_runner, capsys):
        report_android(mock_runner)
        out = capsys.readouterr().out
        assert "Additional setup required for Android automation" in out
        assert "Android Automation Setup Instructions" in out

    def test_report_ready(self, mock_runner, monkeypatch, capsys):
        monkeypatch.setenv("ANDROID_HOME", "/sdk")
        monkeypatch.setenv("JAVA_HOME", "/jdk")
        mock_runner.set_output("adb devices", ADB_WITH_DEVICE)
        report_android(mock_runner)
        out = capsys.readouterr().out
        assert "Android automation environment ready!" in out
        assert "Setup Instructions" not in out


class TestIOS:
    def test_all_found(self, mock_runner):
        mock_runner.set_output("xcodebuild -version", "Xcode 15.2\nBuild version 15C500b")
        mock_runner.set_output("xcrun simctl list devices", "-- iOS 17.2 --\n    iPhone 15 (ABC) (Shutdown)")
        mock_runner.set_output(WDA_SEARCH, "/Applications/Xcode.app/.../WebDriverAgentRunner.app")
        mock_runner.set_output("carthage version", "0.39.1")

        reqs = check_ios_requirements(mock_runner)
        assert reqs.ready

    def test_no_simulators(self, mock_runner, capsys):
        mock_runner.set_output("xcrun simctl list devices", "== Devices ==")
        reqs = check_ios_requirements(mock_runner)
        assert not reqs.simctl
        assert not reqs.webdriveragent
        assert "No iOS Simulator found" in capsys.readouterr().out

    def test_no_xcode(self, mock_runner, capsys):
        for command in ("xcodebuild -version", "xcrun simctl list", "xcrun simctl list devices",
                        WDA_SEARCH, "carthage version"):
            mock_runner.set_failure(command)
        reqs = check_ios_requirements(mock_runner)
        assert not any(reqs.model_dump().values())
        assert "Xcode not found" in capsys.readouterr().out


class TestRunPlatformChecks:
    def test_windows_is_android_only(self, mock_runner):
        run_platform_checks(Platform.WINDOWS, mock_runner)
        assert mock_runner.commands == ["adb devices"]

    def test_macos_checks_both(self, mock_runner):
        run_platform_checks(Platform.MACOS, mock_runner)
        assert mock_runner.commands[0] == "xcodebuild -version"
        assert mock_runner.commands[-1] == "adb devices"
