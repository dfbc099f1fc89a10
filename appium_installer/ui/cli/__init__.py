"""CLI command groups — thin wrappers over ``appium_installer.core.services``."""
