"""
Shell command adapter — the single place where ``subprocess.run`` is called.

Two modes, chosen per action:

- stream: the child inherits stdin/stdout/stderr, so npm and appium
  progress bars render directly in the user's terminal. Only the exit
  code comes back.
- capture: stdout/stderr are collected for the caller to parse
  (version probes, ``appium driver list``, ``npm view``).

With ``dry_run`` set, stream actions are announced and skipped while
capture probes still run, so a dry run shows real detection results.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Callable

from appium_installer.adapters.base import Adapter, ExecutionContext
from appium_installer.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ShellCommandAdapter(Adapter):
    """Execute shell command strings through the platform shell."""

    def __init__(
        self,
        dry_run: bool = False,
        echo: Callable[[str], None] | None = None,
    ):
        self._dry_run = dry_run
        self._echo = echo or print

    @property
    def name(self) -> str:
        return "shell"

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.action.command.strip():
            return False, "Missing command"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        command = action.command

        if action.stream and self._dry_run:
            self._echo(f"[dry-run] {command}")
            return Receipt.skip(
                adapter=self.name,
                action_id=action.id,
                reason="dry run",
                metadata={"command": command},
            )

        logger.debug("Executing: %s (stream=%s)", command, action.stream)
        start = time.monotonic()

        try:
            if action.stream:
                result = subprocess.run(
                    command,
                    shell=True,
                    timeout=action.timeout,
                )
                output, stderr = "", ""
            else:
                result = subprocess.run(
                    command,
                    shell=True,
                    capture_output=True,
                    text=True,
                    timeout=action.timeout,
                )
                output = (result.stdout or "").strip()
                stderr = (result.stderr or "").strip()

            elapsed_ms = int((time.monotonic() - start) * 1000)

            if result.returncode == 0:
                return Receipt.success(
                    adapter=self.name,
                    action_id=action.id,
                    output=output,
                    duration_ms=elapsed_ms,
                    return_code=0,
                    metadata={"command": command, "stderr": stderr},
                )

            logger.info("Command failed (exit %d): %s", result.returncode, command)
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=stderr or f"Command exited with code {result.returncode}",
                output=output,
                duration_ms=elapsed_ms,
                return_code=result.returncode,
                metadata={"command": command},
            )

        except subprocess.TimeoutExpired:
            logger.warning("Command timed out after %ss: %s", action.timeout, command)
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command timed out after {action.timeout}s",
                metadata={"command": command, "timeout": action.timeout},
            )
        except Exception as e:
            logger.exception("Subprocess error: %s", command)
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command execution error: {e}",
                metadata={"command": command},
            )
