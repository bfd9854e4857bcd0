"""
Bootstrap context — what every pipeline step works against.

Built once by the CLI (or by a test) and handed to each step: the
validated config, the adapter registry all side effects go through,
and the project directory the manifest is read from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mise_bootstrap.adapters.registry import AdapterRegistry
from mise_bootstrap.core.models.action import Action, Receipt
from mise_bootstrap.core.models.config import BootstrapConfig


@dataclass
class BootstrapContext:
    config: BootstrapConfig
    registry: AdapterRegistry
    project_dir: Path = field(default_factory=Path.cwd)
    # Mutating commands show their output live; off for --json runs.
    stream_output: bool = True

    @property
    def dry_run(self) -> bool:
        return self.registry.dry_run

    def execute(self, action: Action) -> Receipt:
        return self.registry.execute_action(action, project_root=str(self.project_dir))

    def shell(
        self,
        action_id: str,
        command: list[str] | str,
        *,
        name: str = "",
        mutating: bool = True,
        env: dict[str, str] | None = None,
        timeout: int | None = None,
    ) -> Receipt:
        """Run a command through the ``shell`` adapter.

        Mutating commands (installs, upgrades, trust) stream to the
        terminal; read-only ones are captured for parsing.
        """
        params: dict[str, Any] = {"command": command}
        if env:
            params["env"] = env
        if timeout is not None:
            params["timeout"] = timeout
        if mutating and self.stream_output:
            params["stream"] = True
        return self.execute(Action(
            id=action_id,
            adapter="shell",
            name=name or (command if isinstance(command, str) else " ".join(command)),
            mutating=mutating,
            params=params,
        ))

    def ensure_line(
        self,
        action_id: str,
        path: Path,
        line: str,
        *,
        header: str = "",
    ) -> Receipt:
        """Make sure ``line`` is present in ``path`` (append if missing)."""
        return self.execute(Action(
            id=action_id,
            adapter="filesystem",
            name=f"append activation line to {path}",
            params={
                "operation": "ensure_line",
                "path": str(path),
                "line": line,
                "header": header,
            },
        ))
