"""
Domain models — Pydantic types for the installer.

All models are re-exported here for convenient access:

    from appium_installer.core.models import Session, Receipt, Category
"""

from appium_installer.core.models.action import Action, Receipt
from appium_installer.core.models.catalog import Category, ItemKind, Platform
from appium_installer.core.models.config import InstallerConfig
from appium_installer.core.models.session import InstallResult, Session

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # catalog.py
    "Category",
    "ItemKind",
    "Platform",
    # config.py
    "InstallerConfig",
    # session.py
    "InstallResult",
    "Session",
]
