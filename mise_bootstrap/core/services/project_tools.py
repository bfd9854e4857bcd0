"""Project trust & install — hand the project's manifest to mise."""

from __future__ import annotations

from typing import Any

from mise_bootstrap.core.config.manifest import require_manifest
from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.observability import console

# Best-effort: a failure is a warning.
_PROJECT_COMMANDS: tuple[tuple[str, list[str]], ...] = (
    ("mise:trust", ["mise", "trust", "-y"]),
    ("mise:use", ["mise", "use", "--yes", "-g"]),
)


def trust_project_config(ctx: BootstrapContext) -> dict[str, Any]:
    """Trust the project manifest and install its pinned tools.

    Raises:
        ManifestError: If the project has no recognised manifest.
    """
    manifest = require_manifest(ctx.config.manifest_files, ctx.project_dir)
    console.log("Project config detected; trusting and installing…")

    outcome: dict[str, str] = {}
    for action_id, command in _PROJECT_COMMANDS:
        receipt = ctx.shell(action_id, command)
        if receipt.failed:
            console.warn(f"`{' '.join(command)}` failed, continuing: {receipt.error}")
        outcome[action_id] = receipt.status

    return {"manifest": str(manifest), "commands": outcome}
