"""
Shell command adapter — run installers, package managers and queries.

Every subprocess the bootstrap starts goes through here: the Homebrew
installer, ``brew``/``mise`` invocations and ``--version`` queries.

Installs can run for minutes, so a ``stream`` action inherits the
terminal and the user sees Homebrew's own progress. Everything else is
captured so its output can be parsed.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from pathlib import Path

from mise_bootstrap.adapters.base import Adapter, ExecutionContext
from mise_bootstrap.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ShellCommandAdapter(Adapter):
    """Execute commands, streaming or capturing their output.

    Action params:
        command (list[str] | str): argv list, or a string run through
            ``/bin/sh``.
        env (dict[str, str]): Extra environment variables.
        timeout (int | None): Seconds before giving up (default: none,
            installers may legitimately take a long time).
        stream (bool): Inherit stdout/stderr instead of capturing them.
            The receipt's ``output`` is then empty.
        cwd (str): Override working directory (default: project root).
    """

    @property
    def name(self) -> str:
        return "shell"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        command = context.param("command")
        if not command:
            return False, "Missing required param: 'command'"
        if not isinstance(command, (str, list)):
            return False, f"'command' must be a string or list, got {type(command).__name__}"

        cwd = context.working_dir
        if cwd and not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        command = context.param("command")
        timeout = context.param("timeout")
        stream = bool(context.param("stream", False))
        cwd = context.working_dir

        env = os.environ.copy()
        env.update(context.param("env") or {})

        logger.debug("Executing: %s (cwd=%s, stream=%s)", command, cwd, stream)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command,
                shell=isinstance(command, str),
                cwd=cwd,
                env=env,
                capture_output=not stream,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command timed out after {timeout}s",
                metadata={"command": command, "timeout": timeout},
            )
        except Exception as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command execution error: {e}",
                metadata={"command": command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = (result.stdout or "").strip()
        stderr = (result.stderr or "").strip()
        metadata = {
            "command": command,
            "return_code": result.returncode,
            "streamed": stream,
        }

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=output,
                duration_ms=elapsed_ms,
                metadata={**metadata, "stderr": stderr},
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=stderr or f"Command exited with code {result.returncode}",
            duration_ms=elapsed_ms,
            metadata={**metadata, "stdout": output},
        )
