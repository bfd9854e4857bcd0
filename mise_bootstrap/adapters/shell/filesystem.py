"""
Filesystem adapter — idempotent dotfile edits.

``ensure_line`` is the one place dotfiles are modified. It appends a
line only when the exact text is not already in the file, so running
the bootstrap again never duplicates activation lines.

Dotfiles are handled as raw bytes: a ``~/.zshrc`` carrying a latin-1
comment is still a valid profile, and its existing bytes are never
decoded or rewritten.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mise_bootstrap.adapters.base import Adapter, ExecutionContext
from mise_bootstrap.core.models.action import Receipt

logger = logging.getLogger(__name__)


class FilesystemAdapter(Adapter):
    """Dotfile operations with receipts.

    Action params:
        operation (str): Only 'ensure_line'.
        path (str): Target path (relative to working_dir, ``~`` allowed).
        line (str): Line that must be present.
        header (str): Optional comment written above a newly added line.
    """

    OPERATIONS = frozenset({"ensure_line"})

    @property
    def name(self) -> str:
        return "filesystem"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.param("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"
        if operation not in self.OPERATIONS:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(sorted(self.OPERATIONS))}"

        if not context.param("path", ""):
            return False, "Missing required param: 'path'"
        if not context.param("line", "").strip():
            return False, "Missing required param: 'line' for ensure_line operation"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        target = Path(context.param("path")).expanduser()
        if not target.is_absolute():
            target = Path(context.working_dir) / target

        try:
            return self._ensure_line(context, target)
        except Exception as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Filesystem error: {e}",
                metadata={"operation": context.param("operation"), "path": str(target)},
            )

    def _ensure_line(self, ctx: ExecutionContext, target: Path) -> Receipt:
        line = ctx.param("line").encode("utf-8")
        header = ctx.param("header", "")

        existing = target.read_bytes() if target.is_file() else b""
        if line in existing:
            return Receipt.success(
                adapter=self.name,
                action_id=ctx.action.id,
                output=f"Already present in {target}",
                metadata={"path": str(target), "added": False},
            )

        chunk = b""
        if existing and not existing.endswith(b"\n"):
            chunk += b"\n"
        chunk += b"\n"
        if header:
            chunk += f"# {header}\n".encode("utf-8")
        chunk += line + b"\n"

        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("ab") as f:
            f.write(chunk)

        logger.debug("Appended %r to %s", line, target)
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=f"Appended to {target}",
            metadata={"path": str(target), "added": True},
        )
