"""Adapters — the command execution boundary.

Public re-exports for convenient access.
"""

from appium_installer.adapters.base import Adapter, ExecutionContext
from appium_installer.adapters.mock import MockAdapter
from appium_installer.adapters.shell.command import ShellCommandAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ShellCommandAdapter",
]
