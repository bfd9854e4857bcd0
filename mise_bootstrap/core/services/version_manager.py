"""
Version-manager bootstrap — mise.

Installs (or best-effort upgrades) mise through Homebrew, registers
shell activation for future interactive shells, and activates it in
the current process so the project steps can use it right away.

Official mise: https://mise.jdx.dev
"""

from __future__ import annotations

from typing import Any

from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.errors import BootstrapError
from mise_bootstrap.core.observability import console
from mise_bootstrap.core.services.tool_lookup import have, load_shell_exports, query_version


def mise_activation_line(shell: str) -> str:
    return f'eval "$(mise activate {shell})"'


def ensure_mise(ctx: BootstrapContext) -> dict[str, Any]:
    """Install or upgrade mise and activate it.

    Raises:
        BootstrapError: If ``brew install mise`` fails or the rc file
            cannot be written.
    """
    result: dict[str, Any] = {"installed": False, "upgraded": False}

    if have("mise"):
        version = query_version(ctx, "mise", "mise:version")
        console.log(f"mise found: {version or 'Unknown version'}")
        result["version"] = version
        if ctx.config.upgrade_version_manager:
            receipt = ctx.shell("mise:upgrade", ["brew", "upgrade", "mise"])
            if receipt.failed:
                console.warn(f"brew upgrade mise failed, continuing: {receipt.error}")
            result["upgraded"] = receipt.ok
    else:
        console.log("Installing mise via Homebrew…")
        receipt = ctx.shell("mise:install", ["brew", "install", "mise"])
        if receipt.failed:
            raise BootstrapError(f"brew install mise failed: {receipt.error}")
        if receipt.skipped:
            console.log(receipt.output)
        result["installed"] = receipt.ok

    rc_file = ctx.config.rc_file_path
    receipt = ctx.ensure_line(
        "mise:rc",
        rc_file,
        mise_activation_line(ctx.config.shell),
        header="mise activation",
    )
    if receipt.failed:
        raise BootstrapError(f"Could not update {rc_file}: {receipt.error}")
    if receipt.metadata.get("added"):
        console.log(f"Appended mise activation to {rc_file}")

    # No prompt hook in this process, so activate through the shims dir.
    result["exported"] = sorted(
        load_shell_exports(ctx, "mise:activate", "mise activate bash --shims")
    )
    result["rc_file"] = str(rc_file)
    return result
