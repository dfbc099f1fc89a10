"""Appium Installer — interactive setup wizard for the Appium toolchain."""

__version__ = "0.1.0"
