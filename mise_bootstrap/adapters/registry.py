"""
Adapter registry — dispatches every Action a bootstrap step issues.

Steps never call adapters directly. The registry looks the adapter up
by name, validates the action, and under ``--dry-run`` skips anything
marked ``mutating`` while still running read-only queries.
"""

from __future__ import annotations

import logging
import time

from mise_bootstrap.adapters.base import Adapter, ExecutionContext
from mise_bootstrap.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Name → adapter lookup plus the dry-run switch."""

    def __init__(self, dry_run: bool = False):
        self._adapters: dict[str, Adapter] = {}
        self.dry_run = dry_run

    def register(self, adapter: Adapter) -> None:
        """Register an adapter, replacing any with the same name."""
        name = adapter.name
        if name in self._adapters:
            logger.debug("Overwriting existing adapter: %s", name)
        self._adapters[name] = adapter
        logger.debug("Registered adapter: %s", name)

    def get(self, name: str) -> Adapter | None:
        return self._adapters.get(name)

    def execute_action(self, action: Action, project_root: str = ".") -> Receipt:
        """Validate, then execute (or skip under dry-run). Never raises."""
        start_time = time.monotonic()

        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"No adapter registered for '{action.adapter}'",
            )

        context = ExecutionContext(action=action, project_root=project_root)

        try:
            is_valid, error_msg = adapter.validate(context)
        except Exception as e:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation error: {e}",
            )
        if not is_valid:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation failed: {error_msg}",
            )

        if self.dry_run and action.mutating:
            return Receipt.skip(
                adapter=action.adapter,
                action_id=action.id,
                reason=f"[dry-run] Would run {action.name or action.id}",
                metadata={"dry_run": True},
            )

        try:
            receipt = adapter.execute(context)
        except Exception as e:
            logger.error("Adapter %s raised during execution: %s", action.adapter, e)
            receipt = Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Unexpected error: {e}",
            )

        receipt.duration_ms = int((time.monotonic() - start_time) * 1000)
        if receipt.failed:
            logger.info("Action %s failed: %s", action.id, receipt.error)
        return receipt


def default_registry(dry_run: bool = False) -> AdapterRegistry:
    """Registry wired with the real shell and filesystem adapters."""
    from mise_bootstrap.adapters.shell.command import ShellCommandAdapter
    from mise_bootstrap.adapters.shell.filesystem import FilesystemAdapter

    registry = AdapterRegistry(dry_run=dry_run)
    registry.register(ShellCommandAdapter())
    registry.register(FilesystemAdapter())
    return registry
