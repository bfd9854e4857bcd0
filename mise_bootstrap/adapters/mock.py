"""
Mock adapter — stands in for ``shell`` (or ``filesystem``) in tests.

Every action succeeds with a canned output unless a test has scripted
that action id with ``set_output`` or ``set_failure``. The contexts it
received are kept in ``call_log`` so tests can assert on the exact
commands a step issued.
"""

from __future__ import annotations

from mise_bootstrap.adapters.base import Adapter, ExecutionContext
from mise_bootstrap.core.models.action import Receipt


class MockAdapter(Adapter):
    """Scripted adapter keyed by action id (``"brew:version"``, ...)."""

    def __init__(self, adapter_name: str = "mock", default_output: str = "[mock] executed"):
        self._name = adapter_name
        self._default_output = default_output
        self._scripted: dict[str, Receipt] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    @property
    def called_ids(self) -> list[str]:
        """Action ids in call order."""
        return [ctx.action.id for ctx in self.call_log]

    def set_output(self, action_id: str, output: str) -> None:
        """Make ``action_id`` succeed with ``output`` (e.g. a ``--version`` line)."""
        self._scripted[action_id] = Receipt.success(
            adapter=self._name, action_id=action_id, output=output
        )

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        """Make ``action_id`` fail, as a non-zero exit would."""
        self._scripted[action_id] = Receipt.failure(
            adapter=self._name, action_id=action_id, error=error
        )

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        action_id = context.action.id
        if action_id in self._scripted:
            return self._scripted[action_id]
        return Receipt.success(
            adapter=self._name,
            action_id=action_id,
            output=self._default_output,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        self.call_log.clear()
        self._scripted.clear()
