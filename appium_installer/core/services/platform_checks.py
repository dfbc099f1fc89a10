"""
Platform environment checks — Android and iOS automation prerequisites.

Read-only probes. Each check prints one ✅/⚠️/❌ line and sets one flag;
a failing probe never raises. The environment is "ready" only when
every flag is set, otherwise the matching setup guide is printed.
"""

from __future__ import annotations

import logging
import os

import click
from pydantic import BaseModel

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.catalog import Platform

logger = logging.getLogger(__name__)

WDA_SEARCH = 'find /Applications/Xcode.app -name "WebDriverAgentRunner.app" 2>/dev/null'


class AndroidRequirements(BaseModel):
    android_sdk: bool = False
    java_jdk: bool = False
    adb_devices: bool = False

    @property
    def ready(self) -> bool:
        return self.android_sdk and self.java_jdk and self.adb_devices


class IOSRequirements(BaseModel):
    xcode: bool = False
    xcrun: bool = False
    simctl: bool = False
    webdriveragent: bool = False
    carthage: bool = False

    @property
    def ready(self) -> bool:
        return all((self.xcode, self.xcrun, self.simctl, self.webdriveragent, self.carthage))


# ── Android ─────────────────────────────────────────────────────


def android_home() -> str | None:
    """SDK location from ANDROID_HOME, else ANDROID_SDK_ROOT."""
    return os.environ.get("ANDROID_HOME") or os.environ.get("ANDROID_SDK_ROOT")


def has_attached_device(adb_output: str) -> bool:
    """True when ``adb devices`` lists at least one device in ``device`` state."""
    for line in adb_output.splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[1] == "device":
            return True
    return False


def check_android_requirements(runner: Adapter, timeout: int = 30) -> AndroidRequirements:
    """Probe SDK/JDK env vars and attached adb devices."""
    click.echo("\n🤖 Checking Android automation requirements...")
    reqs = AndroidRequirements()

    sdk = android_home()
    if sdk:
        click.echo(f"✅ ANDROID_HOME: {sdk}")
        reqs.android_sdk = True
    else:
        click.echo("❌ ANDROID_HOME environment variable not set")

    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        click.echo(f"✅ JAVA_HOME: {java_home}")
        reqs.java_jdk = True
    else:
        click.echo("❌ JAVA_HOME environment variable not set")

    adb = runner.run("adb devices", action_id="adb-devices", timeout=timeout)
    if adb.failed:
        click.echo("❌ ADB command could not be executed")
    elif has_attached_device(adb.output):
        click.echo("✅ ADB devices found")
        reqs.adb_devices = True
    else:
        click.echo("⚠️  No ADB devices found (emulator or real device required)")

    logger.debug("Android requirements: %s", reqs)
    return reqs


def show_android_setup_instructions() -> None:
    click.echo("\n📱 Android Automation Setup Instructions:")
    click.echo("==========================================")

    click.echo("\n🔧 Android SDK Installation:")
    click.echo("1. Download Android Studio: https://developer.android.com/studio")
    click.echo("2. Open Android Studio and go to SDK Manager")
    click.echo("3. Settings -> Languages & Frameworks -> Android SDK")
    click.echo("4. Download Android SDK Platform (API level 30+)")
    click.echo("5. Download Android SDK Platform-Tools")
    click.echo("6. Set ANDROID_HOME environment variable")

    click.echo("\n☕ Java JDK Installation:")
    click.echo("1. Download Java JDK 8+: https://adoptium.net/")
    click.echo("2. Set JAVA_HOME environment variable")

    click.echo("\n📱 Device Preparation:")
    click.echo("1. Android Emulator: Create with Android Studio AVD Manager")
    click.echo("2. Real Device: Enable USB Debugging")
    click.echo("3. Test device connection: adb devices")

    click.echo("\n🔍 Installation Verification:")
    click.echo("1. appium driver doctor uiautomator2")
    click.echo("2. appium server (check that driver is listed)")


# ── iOS ─────────────────────────────────────────────────────────


def check_ios_requirements(runner: Adapter, timeout: int = 30) -> IOSRequirements:
    """Probe Xcode, simctl, simulators, WebDriverAgent and Carthage."""
    click.echo("\n🍎 Checking iOS automation requirements...")
    reqs = IOSRequirements()

    xcode = runner.run("xcodebuild -version", action_id="xcode-version", timeout=timeout)
    if xcode.ok:
        first_line = xcode.output.splitlines()[0] if xcode.output else ""
        click.echo(f"✅ Xcode: {first_line}")
        reqs.xcode = True
    else:
        click.echo("❌ Xcode not found (required only on macOS)")

    xcrun = runner.run("xcrun simctl list", action_id="simctl-list", timeout=timeout)
    if xcrun.ok:
        click.echo("✅ xcrun simctl available")
        reqs.xcrun = True
    else:
        click.echo("❌ xcrun simctl not found")

    sims = runner.run("xcrun simctl list devices", action_id="simctl-devices", timeout=timeout)
    if sims.failed:
        click.echo("❌ iOS Simulator could not be checked")
    elif "iPhone" in sims.output or "iPad" in sims.output:
        click.echo("✅ iOS Simulators found")
        reqs.simctl = True
    else:
        click.echo("⚠️  No iOS Simulator found")

    wda = runner.run(WDA_SEARCH, action_id="wda-search", timeout=timeout)
    if wda.failed:
        click.echo("❌ WebDriverAgent could not be checked")
    elif wda.output.strip():
        click.echo("✅ WebDriverAgent found")
        reqs.webdriveragent = True
    else:
        click.echo("⚠️  WebDriverAgent not found (required for XCUITest driver)")

    carthage = runner.run("carthage version", action_id="carthage-version", timeout=timeout)
    if carthage.ok:
        click.echo(f"✅ Carthage: {carthage.output.strip()}")
        reqs.carthage = True
    else:
        click.echo("❌ Carthage not found (required for WebDriverAgent)")

    logger.debug("iOS requirements: %s", reqs)
    return reqs


def show_ios_setup_instructions() -> None:
    click.echo("\n🍎 iOS Automation Setup Instructions:")
    click.echo("=====================================")

    click.echo("\n🔧 Xcode Installation:")
    click.echo("1. Download Xcode from Mac App Store")
    click.echo("2. Install Xcode Command Line Tools: xcode-select --install")
    click.echo("3. Open Xcode and accept license")
    click.echo("4. Open Xcode at least once and accept Developer Tools")

    click.echo("\n📱 iOS Simulator Setup:")
    click.echo("1. Xcode -> Window -> Devices and Simulators")
    click.echo("2. Click + button in Simulators tab")
    click.echo("3. Create iPhone/iPad simulator")
    click.echo("4. Start simulator and test")

    click.echo("\n🔧 Carthage Installation (for WebDriverAgent):")
    click.echo("1. Install with Homebrew: brew install carthage")
    click.echo("2. Alternative: https://github.com/Carthage/Carthage/releases")
    click.echo("3. Verify installation: carthage version")

    click.echo("\n🤖 WebDriverAgent Installation:")
    click.echo("1. Install XCUITest driver: appium driver install xcuitest")
    click.echo("2. WebDriverAgent will be installed automatically")
    click.echo("3. WebDriverAgent will be compiled on first run")
    click.echo("4. This process may take several minutes")

    click.echo("\n🔍 Installation Verification:")
    click.echo("1. appium driver doctor xcuitest")
    click.echo("2. appium server (check that driver is listed)")
    click.echo("3. Check WebDriverAgentRunner.app file existence")

    click.echo("\n📚 Detailed Information:")
    click.echo("- XCUITest Driver: https://appium.github.io/appium-xcuitest-driver/")
    click.echo("- WebDriverAgent: https://github.com/appium/WebDriverAgent")


# ── Combined ────────────────────────────────────────────────────


def report_android(runner: Adapter, timeout: int = 30) -> AndroidRequirements:
    reqs = check_android_requirements(runner, timeout)
    if reqs.ready:
        click.echo("\n🎉 Android automation environment ready!")
    else:
        click.echo("\n⚠️  Additional setup required for Android automation")
        show_android_setup_instructions()
    return reqs


def report_ios(runner: Adapter, timeout: int = 30) -> IOSRequirements:
    reqs = check_ios_requirements(runner, timeout)
    if reqs.ready:
        click.echo("\n🎉 iOS automation environment ready!")
    else:
        click.echo("\n⚠️  Additional setup required for iOS automation")
        show_ios_setup_instructions()
    return reqs


def run_platform_checks(platform: Platform, runner: Adapter, timeout: int = 30) -> None:
    """macOS gets iOS and Android checks; every other platform Android only."""
    if platform == Platform.MACOS:
        report_ios(runner, timeout)
    report_android(runner, timeout)
