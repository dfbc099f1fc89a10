"""
Logging configuration for the installer.

``setup_logging`` is called once by the CLI group. It configures the
``appium_installer`` package logger only, so every module using
``logger = logging.getLogger(__name__)`` is covered and nothing else in
the process is touched.

Logging is diagnostic: prompts and ✅/❌ status lines go through
``click.echo``. Console output goes to stderr so it never mixes with
``catalog --json`` on stdout.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  APPIUM_INSTALLER_LOG_LEVEL  >  WARNING

A log file is written only when APPIUM_INSTALLER_LOG_FILE is set. It has
its own level (APPIUM_INSTALLER_LOG_FILE_LEVEL) so a run can stay quiet
on the terminal while every command ends up in the file.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "appium_installer"

# Console format by level: bare messages by default, timestamps at
# INFO, logger name and line number at DEBUG.
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT = ("%(levelname)s: %(message)s", None)

_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s — %(message)s", "%Y-%m-%d %H:%M:%S")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Safe to call more than once: earlier handlers are closed and
    replaced. Returns the configured package logger.
    """
    console_level = _parse_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt, datefmt = _CONSOLE_FORMATS.get(console_level, _CONSOLE_DEFAULT)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(console)

    lowest = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        lowest = min(lowest, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(*_FILE_FORMAT))
        logger.addHandler(fh)

    logger.setLevel(lowest)
    logger.propagate = False
    return logger


def _parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown or empty means WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
