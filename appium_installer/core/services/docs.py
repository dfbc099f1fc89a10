"""
Documentation viewer — static guides browsed from a numbered menu.

All sections are plain text except "System Information", which runs the
live probes from ``core.services.sysinfo``.
"""

from __future__ import annotations

import click

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.config import InstallerConfig
from appium_installer.core.services.prompts import Ask, pause, select_one
from appium_installer.core.services.sysinfo import show_system_information

BACK_TO_MAIN_MENU = "Back to Main Menu"
SYSTEM_INFORMATION = "System Information"


APPIUM_OVERVIEW = """
🚀 Appium 3.0 Overview
=====================

Appium 3.0 is the latest version of the open-source mobile automation framework.

Key Features:
• WebDriver BiDi protocol support
• Advanced plugin system
• Better performance and security
• Cross-platform support (iOS, Android, Windows, macOS)
• Multiple programming language support

Supported Platforms:
• Mobile: iOS, Android, Tizen
• Desktop: Windows, macOS, Linux
• Web: Chrome, Firefox, Safari
• TV: Roku, Android TV, Samsung TV

Documentation: https://appium.io/docs/en/3.0/
"""

SYSTEM_REQUIREMENTS = """
🔧 System Requirements
=====================

Minimum Requirements:
• Node.js 16.0.0 or higher
• npm (comes with Node.js)
• Internet connection
• Platform-specific tools

Platform-Specific Requirements:

Windows:
• PowerShell or CMD
• Administrator privileges (for some installations)
• Windows 10 or higher

macOS:
• Xcode (for iOS automation)
• Homebrew (recommended)
• macOS 10.15 or higher

Linux:
• sudo privileges
• Ubuntu 18.04+ or CentOS 7+
• Development tools

Mobile Automation Requirements:

Android:
• Android SDK
• Java JDK 8+
• Android device or emulator
• ANDROID_HOME environment variable

iOS (macOS only):
• Xcode
• iOS Simulator or device
• Carthage (for WebDriverAgent)
• Apple Developer account (for real devices)
"""

NODEJS_INSTALLATION = """
📦 Node.js Installation Guide
============================

Method 1: Official Website (Recommended)
1. Visit https://nodejs.org
2. Download LTS version (Long Term Support)
3. Run the installer
4. Follow installation wizard
5. Restart terminal/command prompt
6. Verify: node --version

Method 2: Package Managers

Windows (Chocolatey):
1. Install Chocolatey: https://chocolatey.org/install
2. Run: choco install nodejs

macOS (Homebrew):
1. Install Homebrew: /bin/bash -c "$(curl -fsSL https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"
2. Run: brew install node

Linux (Ubuntu/Debian):
1. Update package list: sudo apt update
2. Install Node.js: sudo apt install nodejs npm

Linux (CentOS/RHEL):
1. Install Node.js: sudo yum install nodejs npm

Verification:
• node --version (should show v16+)
• npm --version (should show 8+)
"""

APPIUM_INSTALLATION = """
🚀 Appium Installation Guide
===========================

Step 1: Install Appium
npm install -g appium@latest

Step 2: Verify Installation
appium --version

Step 3: Install Drivers
appium driver install uiautomator2  # Android
appium driver install xcuitest     # iOS (macOS only)

Step 4: Verify Drivers
appium driver list

Step 5: Start Appium Server
appium server

Alternative Installation Methods:

Using npm in project:
npm init -y
npm install appium
npx appium driver install uiautomator2

Using yarn:
yarn global add appium
yarn global add appium-uiautomator2-driver

Troubleshooting:
• Permission errors: Use sudo (Linux/macOS) or run as Administrator (Windows)
• Network issues: Check firewall and proxy settings
• Version conflicts: Use nvm to manage Node.js versions
"""

DRIVER_INSTALLATION = """
🔧 Driver Installation Guide
============================

Official Drivers:
• chromium: appium driver install chromium
• espresso: appium driver install espresso
• gecko: appium driver install gecko
• mac2: appium driver install mac2
• safari: appium driver install safari
• uiautomator2: appium driver install uiautomator2
• windows: appium driver install windows
• xcuitest: appium driver install xcuitest

Third-party Drivers:
• appium-flutter-driver: appium driver install --source=npm appium-flutter-driver
• appium-novawindows-driver: appium driver install --source=npm appium-novawindows-driver
• appium-lg-webos-driver: appium driver install --source=npm appium-lg-webos-driver

Legacy Drivers (Appium 1 only):
• appium-tizen-driver: npm install appium-tizen-driver
• appium-youiengine-driver: npm install appium-youiengine-driver

Driver Selection Guide:

For Android:
• uiautomator2: Modern Android apps
• espresso: Android native apps
• flutter: Flutter apps

For iOS:
• xcuitest: iOS native apps
• flutter: Flutter apps

For Web:
• chromium: Chrome, Edge
• gecko: Firefox
• safari: Safari

For Desktop:
• windows: Windows apps
• mac2: macOS apps

Verification:
appium driver list
appium driver doctor [driver-name]
"""

PLUGIN_INSTALLATION = """
🔌 Plugin Installation Guide
===========================

Official Plugins:
• execute-driver: appium plugin install execute-driver
• images: appium plugin install images
• inspector: appium plugin install inspector
• relaxed-caps: appium plugin install relaxed-caps
• storage: appium plugin install storage
• universal-xml: appium plugin install universal-xml

Third-party Plugins:
• appium-altunity-plugin: appium plugin install --source=npm appium-altunity-plugin
• appium-device-farm: appium plugin install --source=npm appium-device-farm
• appium-gestures-plugin: appium plugin install --source=npm appium-gestures-plugin

Client Libraries:
• appium-python-client: pip install Appium-Python-Client
• appium-java-client: Add to Maven/Gradle dependencies
• appium-javascript-client: npm install appium-javascript-client
• appium-dotnet-client: dotnet add package Appium.WebDriver

Tools:
• appium-inspector: npm install -g appium-inspector
• appium-doctor: Integrated with Appium CLI

Plugin Management:
• List plugins: appium plugin list
• Uninstall plugin: appium plugin uninstall [plugin-name]
• Update plugin: appium plugin update [plugin-name]
"""

PLATFORM_SPECIFIC_SETUP = """
🤖 Platform-Specific Setup
==========================

Android Setup:

1. Install Android Studio:
   • Download from https://developer.android.com/studio
   • Install with default settings
   • Open SDK Manager

2. Install Android SDK:
   • Android SDK Platform (API 30+)
   • Android SDK Platform-Tools
   • Android SDK Build-Tools

3. Set Environment Variables:
   • ANDROID_HOME: Path to Android SDK
   • Add to PATH: $ANDROID_HOME/platform-tools

4. Install Java JDK:
   • Download from https://adoptium.net/
   • Set JAVA_HOME environment variable

5. Setup Device/Emulator:
   • Create AVD in Android Studio
   • Or connect real device with USB Debugging

iOS Setup (macOS only):

1. Install Xcode:
   • Download from Mac App Store
   • Open Xcode and accept license
   • Install Command Line Tools: xcode-select --install

2. Install Carthage:
   • brew install carthage
   • Or download from GitHub releases

3. Setup Simulator:
   • Xcode → Window → Devices and Simulators
   • Create iPhone/iPad simulator
   • Test simulator functionality

4. WebDriverAgent:
   • Automatically installed with XCUITest driver
   • First run will compile (takes several minutes)

Verification Commands:
• Android: adb devices
• iOS: xcrun simctl list devices
• Appium: appium driver doctor [driver-name]
"""

CONFIGURATION_MANAGEMENT = """
⚙️ Configuration Management
===========================

1. Appium Configuration File (.appiumrc.json):

Basic Configuration:
{
  "server": {
    "port": 4723,
    "host": "0.0.0.0",
    "log-level": "info"
  },
  "plugins": {
    "images": {
      "enabled": true
    },
    "relaxed-caps": {
      "enabled": true
    }
  }
}

Advanced Configuration:
{
  "server": {
    "port": 4723,
    "host": "0.0.0.0",
    "log-level": "debug",
    "session-override": true,
    "relaxed-security": true,
    "allow-cors": true,
    "allow-insecure": ["chromedriver_autodownload"]
  },
  "plugins": {
    "images": {
      "enabled": true,
      "threshold": 0.4
    },
    "relaxed-caps": {
      "enabled": true
    },
    "execute-driver": {
      "enabled": true
    }
  }
}

2. Capability Templates:

Android (UiAutomator2):
{
  "platformName": "Android",
  "automationName": "UiAutomator2",
  "deviceName": "Android Emulator",
  "app": "/path/to/app.apk",
  "appPackage": "com.example.app",
  "appActivity": ".MainActivity",
  "noReset": true,
  "fullReset": false
}

iOS (XCUITest):
{
  "platformName": "iOS",
  "automationName": "XCUITest",
  "deviceName": "iPhone 14",
  "app": "/path/to/app.app",
  "bundleId": "com.example.app",
  "noReset": true,
  "fullReset": false
}

Web (Chrome):
{
  "platformName": "Android",
  "automationName": "UiAutomator2",
  "deviceName": "Android Emulator",
  "browserName": "Chrome",
  "chromedriverExecutable": "/path/to/chromedriver"
}

3. Server Settings:

Start Appium Server:
appium server --port 4723 --host 0.0.0.0

With Configuration File:
appium server --config .appiumrc.json

With Custom Settings:
appium server --port 4724 --log-level debug --relaxed-security

4. Environment Variables:

APPIUM_HOME=/usr/local/lib/node_modules/appium
ANDROID_HOME=/Users/username/Library/Android/sdk
JAVA_HOME=/Library/Java/JavaVirtualMachines/jdk-11.jdk/Contents/Home

5. Driver Configuration:

UiAutomator2 Driver:
{
  "server": {
    "port": 4723
  },
  "uiautomator2": {
    "skipServerInstallation": false,
    "enforceXPath1": true
  }
}

XCUITest Driver:
{
  "server": {
    "port": 4723
  },
  "xcuitest": {
    "skipServerInstallation": false,
    "useNewWDA": false,
    "wdaStartupRetries": 3
  }
}

6. Plugin Configuration:

Images Plugin:
{
  "images": {
    "enabled": true,
    "threshold": 0.4,
    "matchTemplate": true
  }
}

Relaxed Caps Plugin:
{
  "relaxed-caps": {
    "enabled": true,
    "allowInsecure": ["chromedriver_autodownload"]
  }
}

7. Logging Configuration:

Log Levels:
• error: Only error messages
• warn: Warning and error messages
• info: General information (default)
• debug: Detailed debugging information
• verbose: Very detailed information

Log Output:
appium server --log-level debug --log-timestamp

8. Security Settings:

Relaxed Security:
appium server --relaxed-security

Allow CORS:
appium server --allow-cors

Allow Insecure:
appium server --allow-insecure chromedriver_autodownload

9. Performance Optimization:

Session Override:
appium server --session-override

Keep Alive:
appium server --keep-alive-timeout 600

10. Configuration Examples:

Development Environment:
{
  "server": {
    "port": 4723,
    "log-level": "debug",
    "relaxed-security": true
  }
}

Production Environment:
{
  "server": {
    "port": 4723,
    "log-level": "info",
    "session-override": false
  }
}

CI/CD Environment:
{
  "server": {
    "port": 4723,
    "log-level": "warn",
    "keep-alive-timeout": 300
  }
}

11. Installer Configuration (this tool):

appium-installer --config installer.yml

installer:
  appium_command: appium
  npm_command: npm
  lts_version: "3.0.0"
  min_node_major: 16
  fetch_catalog: true
  probe_timeout: 30
"""

TROUBLESHOOTING = """
🔧 Troubleshooting Guide
=======================

Common Issues:

1. Node.js Issues:
   • Permission denied: Use sudo (Linux/macOS) or run as Administrator (Windows)
   • Version conflicts: Use nvm to manage versions
   • PATH issues: Restart terminal after installation

2. Appium Installation Issues:
   • Network errors: Check internet connection and proxy settings
   • Permission errors: Use --unsafe-perm flag
   • Version conflicts: Clear npm cache: npm cache clean --force

3. Driver Issues:
   • Driver not found: Check driver installation with appium driver list
   • Permission errors: Run with appropriate privileges
   • Version mismatches: Update drivers to latest versions

4. Platform-Specific Issues:

Android:
• ADB not found: Check ANDROID_HOME and PATH
• Device not detected: Enable USB Debugging
• Emulator issues: Check AVD configuration

iOS:
• Xcode issues: Update Xcode and Command Line Tools
• Simulator issues: Reset simulator or create new one
• WebDriverAgent issues: Check Carthage installation

5. Network Issues:
• Firewall: Allow Node.js and Appium through firewall
• Proxy: Configure npm proxy settings
• Corporate networks: Contact IT for assistance

Debug Commands:
• appium --version
• appium driver list
• appium plugin list
• appium driver doctor [driver-name]
• node --version
• npm --version

Getting Help:
• Appium Documentation: https://appium.io/docs/
• GitHub Issues: https://github.com/appium/appium/issues
• Community Forum: https://discuss.appium.io/
"""

# Menu order. SYSTEM_INFORMATION is live and has no static text.
DOC_SECTIONS: dict[str, str | None] = {
    "Appium 3.0 Overview": APPIUM_OVERVIEW,
    "System Requirements": SYSTEM_REQUIREMENTS,
    "Node.js Installation": NODEJS_INSTALLATION,
    "Appium Installation": APPIUM_INSTALLATION,
    "Driver Installation": DRIVER_INSTALLATION,
    "Plugin Installation": PLUGIN_INSTALLATION,
    "Platform-Specific Setup": PLATFORM_SPECIFIC_SETUP,
    "Configuration Management": CONFIGURATION_MANAGEMENT,
    SYSTEM_INFORMATION: None,
    "Troubleshooting": TROUBLESHOOTING,
}


def section_titles() -> list[str]:
    """Menu entries, ending with the way back out."""
    return [*DOC_SECTIONS, BACK_TO_MAIN_MENU]


def find_section(query: str) -> str | None:
    """Case-insensitive lookup by full title or title prefix."""
    wanted = query.strip().lower()
    for title in DOC_SECTIONS:
        if title.lower() == wanted:
            return title
    for title in DOC_SECTIONS:
        if title.lower().startswith(wanted):
            return title
    return None


def show_section(
    title: str,
    runner: Adapter,
    config: InstallerConfig | None = None,
) -> None:
    """Print one section with its underlined heading."""
    click.echo(f"\n📖 {title}")
    click.echo("=" * (len(title) + 4))

    text = DOC_SECTIONS[title]
    if text is None:
        show_system_information(runner, config)
    else:
        click.echo(text)


def show_detailed_documentation(
    runner: Adapter,
    config: InstallerConfig | None = None,
    ask: Ask | None = None,
) -> None:
    """Browse sections until the user picks "Back to Main Menu"."""
    click.echo("\n📚 Detailed Installation Documentation")
    click.echo("=====================================")

    titles = section_titles()
    while True:
        title = select_one(titles, "Select documentation section:", ask=ask)
        if title == BACK_TO_MAIN_MENU:
            return
        show_section(title, runner, config)
        pause("\nPress Enter to continue...", ask=ask)
