"""
CLI commands for mobile automation environment checks.

Thin wrappers over ``appium_installer.core.services.platform_checks``.
Exit status is 0 when the environment is ready, 1 otherwise.
"""

from __future__ import annotations

import sys

import click


@click.group("check")
def check() -> None:
    """Check — Android and iOS automation prerequisites."""


@check.command("android")
@click.pass_context
def android(ctx: click.Context) -> None:
    """Check ANDROID_HOME, JAVA_HOME and attached adb devices."""
    from appium_installer.core.services.platform_checks import report_android

    reqs = report_android(ctx.obj["runner"], ctx.obj["config"].probe_timeout)
    if not reqs.ready:
        sys.exit(1)


@check.command("ios")
@click.pass_context
def ios(ctx: click.Context) -> None:
    """Check Xcode, simulators, WebDriverAgent and Carthage."""
    from appium_installer.core.services.platform_checks import report_ios

    reqs = report_ios(ctx.obj["runner"], ctx.obj["config"].probe_timeout)
    if not reqs.ready:
        sys.exit(1)
