"""
System information — a best-effort dump for bug reports.

Every probe is independent: a missing binary or unreadable file turns
into ``Not installed`` / ``❌ Could not ...`` for that one line and the
dump carries on.
"""

from __future__ import annotations

import logging
import os
import platform
import re
import socket
import sys

import click

from appium_installer.adapters.base import Adapter
from appium_installer.core.models.config import InstallerConfig

logger = logging.getLogger(__name__)

IMPORTANT_ENV_VARS: tuple[str, ...] = (
    "NODE_PATH",
    "NPM_CONFIG_PREFIX",
    "ANDROID_HOME",
    "ANDROID_SDK_ROOT",
    "JAVA_HOME",
    "PATH",
)

# (label, command, macOS only)
TOOL_VERSION_COMMANDS: list[tuple[str, str, bool]] = [
    ("Appium", "appium --version", False),
    ("Java", "java -version 2>&1", False),
    ("Python", "python --version", False),
    ("Git", "git --version", False),
    ("Xcode", "xcodebuild -version", True),
    ("Homebrew", "brew --version", True),
    ("ADB", "adb version", False),
]

_INET_RE = re.compile(r"^\d+:\s+(\S+)\s+inet\s+(\d+\.\d+\.\d+\.\d+)")


# ── Probes ──────────────────────────────────────────────────────


def first_line(text: str) -> str:
    lines = text.strip().splitlines()
    return lines[0] if lines else ""


def tool_version(runner: Adapter, command: str, timeout: int = 30) -> str | None:
    """First output line of a version command, or None if it failed."""
    receipt = runner.run(command, action_id=f"probe:{command}", timeout=timeout)
    if receipt.failed:
        return None
    return first_line(receipt.output) or None


def read_meminfo(path: str = "/proc/meminfo") -> dict[str, int]:
    """Total/available RAM in MB from /proc/meminfo; empty off Linux."""
    info: dict[str, int] = {}
    try:
        with open(path) as f:
            for line in f:
                if line.startswith("MemTotal:"):
                    info["total_mb"] = int(line.split()[1]) // 1024
                elif line.startswith("MemAvailable:"):
                    info["available_mb"] = int(line.split()[1]) // 1024
    except (FileNotFoundError, ValueError, IndexError):
        pass
    return info


def process_rss_mb() -> int | None:
    """Peak resident set size of this process in MB (POSIX only)."""
    try:
        import resource
    except ImportError:
        return None
    rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # Linux reports KiB, macOS bytes
    if sys.platform == "darwin":
        return rss // (1024 * 1024)
    return rss // 1024


def parse_ip_addr(output: str) -> list[tuple[str, str]]:
    """``ip -o -4 addr show`` -> [(interface, address)] without loopback."""
    found: list[tuple[str, str]] = []
    for line in output.splitlines():
        match = _INET_RE.match(line.strip())
        if match and not match.group(2).startswith("127."):
            found.append((match.group(1), match.group(2)))
    return found


def ipv4_addresses(runner: Adapter, timeout: int = 30) -> list[tuple[str, str]]:
    """Non-loopback IPv4 addresses, via ``ip`` or the resolver as fallback."""
    receipt = runner.run("ip -o -4 addr show", action_id="ip-addr", timeout=timeout)
    if receipt.ok:
        found = parse_ip_addr(receipt.output)
        if found:
            return found

    hostname = socket.gethostname()
    try:
        _, _, addresses = socket.gethostbyname_ex(hostname)
    except OSError:
        return []
    return [(hostname, a) for a in addresses if not a.startswith("127.")]


# ── Sections ────────────────────────────────────────────────────


def show_disk_space(runner: Adapter, timeout: int = 30) -> None:
    if platform.system() == "Windows":
        command, title = "wmic logicaldisk get size,freespace,caption", "Windows Disk Space:"
    else:
        command, title = "df -h", "Disk Space:"

    receipt = runner.run(command, action_id="disk-space", timeout=timeout)
    if receipt.failed:
        click.echo("❌ Could not get disk space information")
        return
    click.echo(title)
    click.echo(receipt.output)


def show_installed_versions(runner: Adapter, timeout: int = 30) -> None:
    node = tool_version(runner, "node --version", timeout)
    npm = tool_version(runner, "npm --version", timeout)
    click.echo(f"Node.js: {node or 'Not installed'}")
    click.echo(f"NPM: {npm or 'Not available'}")

    is_macos = platform.system() == "Darwin"
    for label, command, macos_only in TOOL_VERSION_COMMANDS:
        if macos_only and not is_macos:
            continue
        version = tool_version(runner, command, timeout)
        click.echo(f"{label}: {version or 'Not installed'}")


def show_environment_variables() -> None:
    for name in IMPORTANT_ENV_VARS:
        value = os.environ.get(name)
        click.echo(f"{name}: {value if value else 'Not set'}")


def show_network_info(runner: Adapter, timeout: int = 30) -> None:
    addresses = ipv4_addresses(runner, timeout)
    click.echo("Network Interfaces:")
    if not addresses:
        click.echo("❌ Could not get network information")
    for interface, address in addresses:
        click.echo(f"{interface}: {address}")


def show_system_information(runner: Adapter, config: InstallerConfig | None = None) -> None:
    """Print the full system information report."""
    config = config or InstallerConfig()
    timeout = config.probe_timeout

    click.echo("\n📊 System Information")
    click.echo("=====================")

    click.echo("\n🖥️  System Information:")
    click.echo(f"Platform: {sys.platform}")
    click.echo(f"Architecture: {platform.machine() or 'unknown'}")
    click.echo(f"Python Version: {platform.python_version()}")
    click.echo(f"Node.js Version: {tool_version(runner, 'node --version', timeout) or 'Not installed'}")
    click.echo(f"NPM Version: {tool_version(runner, f'{config.npm_command} --version', timeout) or 'Not available'}")

    click.echo("\n💾 Memory Information:")
    mem = read_meminfo()
    if mem:
        click.echo(f"Total: {mem.get('total_mb', 0)} MB")
        click.echo(f"Available: {mem.get('available_mb', 0)} MB")
    rss = process_rss_mb()
    if rss is not None:
        click.echo(f"Installer RSS: {rss} MB")
    if not mem and rss is None:
        click.echo("❌ Could not get memory information")

    click.echo("\n💿 Disk Space:")
    show_disk_space(runner, timeout)

    click.echo("\n📦 Installed Versions:")
    show_installed_versions(runner, timeout)

    click.echo("\n🌍 Environment Variables:")
    show_environment_variables()

    click.echo("\n🌐 Network Information:")
    show_network_info(runner, timeout)
