"""
Mock adapter — universal test double for command execution.

Never spawns a process. Returns a configured receipt per command string
(default: success) and logs every context it receives, so tests can
assert on the exact commands the wizard built.
"""

from __future__ import annotations

from appium_installer.adapters.base import Adapter, ExecutionContext
from appium_installer.core.models.action import Receipt


class MockAdapter(Adapter):
    """Mock adapter keyed by command string.

    By default, returns success with empty output for everything. Can be
    configured with custom responses per command.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        default_output: str = "",
    ):
        self._name = adapter_name
        self._default_output = default_output
        self._responses: dict[str, Receipt] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    @property
    def commands(self) -> list[str]:
        """Command strings in execution order."""
        return [ctx.action.command for ctx in self._call_log]

    def set_output(self, command: str, output: str) -> None:
        """Configure a command to succeed with the given stdout."""
        self._responses[command] = Receipt.success(
            adapter=self._name,
            action_id=command,
            output=output,
            return_code=0,
        )

    def set_failure(
        self,
        command: str,
        error: str = "Mock failure",
        return_code: int | None = 1,
    ) -> None:
        """Configure a specific command to fail."""
        self._responses[command] = Receipt.failure(
            adapter=self._name,
            action_id=command,
            error=error,
            return_code=return_code,
        )

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.action.command.strip():
            return False, "Missing command"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)

        if context.action.command in self._responses:
            return self._responses[context.action.command]

        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._responses.clear()
