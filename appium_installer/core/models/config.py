"""
InstallerConfig — tunables for a wizard run.

Defaults reproduce the stock behaviour; a YAML file can override any
field (see ``core.config.loader``).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class InstallerConfig(BaseModel):
    """Commands, version pins and timeouts used by the wizard."""

    appium_command: str = "appium"
    npm_command: str = "npm"

    lts_version: str = "3.0.0"
    min_node_major: int = Field(default=16, ge=1)
    recent_versions: int = Field(default=8, ge=0)

    # Query `appium driver/plugin list --installed=false` before falling
    # back to the built-in catalog.
    fetch_catalog: bool = True

    probe_timeout: int = Field(default=30, gt=0)
    install_timeout: int | None = None
