"""
Session — the state of one wizard run.

Created fresh when the user picks "Start Installation Process" and
passed explicitly through every step. Nothing is persisted.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from appium_installer.core.models.catalog import Category, Platform


class InstallResult(BaseModel):
    """Outcome of one install attempt."""

    name: str
    category: Category | None = None    # None for the Appium server itself
    command: str | None = None          # None when nothing was executed
    status: Literal["ok", "failed"] = "ok"
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class Session(BaseModel):
    """Everything the wizard learns and does during one run."""

    platform: Platform = Platform.UNKNOWN
    detected_platform: Platform = Platform.UNKNOWN
    appium_version: str | None = None

    selected_drivers: list[str] = Field(default_factory=list)
    selected_plugins: list[str] = Field(default_factory=list)

    results: list[InstallResult] = Field(default_factory=list)
    # Append-only, in attempt order, duplicates kept.
    failed_installations: list[str] = Field(default_factory=list)

    def record(self, result: InstallResult) -> None:
        """Store an install outcome; failures also go to the failure log."""
        self.results.append(result)
        if not result.ok:
            self.failed_installations.append(result.name)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_installations)
