"""
Adapter base — the contract between the wizard and the shell.

Every external command (npm, appium, brew, adb, xcrun, ...) goes
through an adapter. Services never call ``subprocess`` themselves, so a
whole wizard run can be replayed against a ``MockAdapter``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from appium_installer.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """The action being executed, as seen by validate/execute and the mock call log."""

    action: Action


class Adapter(ABC):
    """Abstract base class for command adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the action can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def run(
        self,
        command: str,
        *,
        action_id: str | None = None,
        stream: bool = False,
        timeout: int | None = None,
    ) -> Receipt:
        """Validate and execute a single command string.

        Convenience used by the services: builds the Action, runs
        ``validate`` and ``execute``, and folds a validation error into
        a failed receipt.
        """
        action = Action(
            id=action_id or command,
            command=command,
            stream=stream,
            timeout=timeout,
        )
        context = ExecutionContext(action=action)
        valid, error = self.validate(context)
        if not valid:
            return Receipt.failure(adapter=self.name, action_id=action.id, error=error)
        return self.execute(context)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
