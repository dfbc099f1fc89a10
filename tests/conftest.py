"""
Shared test fixtures and configuration.
"""

import logging

import pytest

from appium_installer.adapters.mock import MockAdapter
from appium_installer.core.models.config import InstallerConfig


class ScriptedAsk:
    """Stand-in for the terminal prompt: answers from a fixed script.

    Records every prompt it was shown. Running out of answers raises
    EOFError, the same thing a closed stdin does.
    """

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def mock_runner() -> MockAdapter:
    """Runner where every command succeeds with empty output."""
    return MockAdapter()


@pytest.fixture
def config() -> InstallerConfig:
    return InstallerConfig()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the host's Appium-related environment out of the tests."""
    for name in (
        "APPIUM_INSTALLER_CONFIG",
        "APPIUM_INSTALLER_LOG_LEVEL",
        "APPIUM_INSTALLER_LOG_FILE",
        "APPIUM_INSTALLER_LOG_FILE_LEVEL",
        "ANDROID_HOME",
        "ANDROID_SDK_ROOT",
        "JAVA_HOME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_ask():
    """Factory: ``make_ask("1", "2,3")`` gives a ScriptedAsk."""
    return ScriptedAsk


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers ``setup_logging`` attached during a CLI test."""
    yield
    logger = logging.getLogger("appium_installer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
