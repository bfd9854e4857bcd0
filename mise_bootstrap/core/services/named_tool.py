"""Named tool install — one extra CLI from Homebrew (AWS CLI by default)."""

from __future__ import annotations

from typing import Any

from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.errors import BootstrapError
from mise_bootstrap.core.observability import console
from mise_bootstrap.core.services.tool_lookup import have, query_version


def install_named_tool(ctx: BootstrapContext) -> dict[str, Any]:
    """``brew install <package>`` unless its executable already resolves.

    Raises:
        BootstrapError: If the install fails.
    """
    tool = ctx.config.named_tool

    if have(tool.executable):
        version = query_version(ctx, tool.executable, "named-tool:version")
        console.log(f"{tool.package} found: {version or 'Unknown version'}")
        return {"package": tool.package, "installed": False, "version": version}

    console.log(f"Installing {tool.package} via Homebrew…")
    receipt = ctx.shell("named-tool:install", ["brew", "install", tool.package])
    if receipt.failed:
        raise BootstrapError(f"brew install {tool.package} failed: {receipt.error}")
    if receipt.skipped:
        console.log(receipt.output)
    return {"package": tool.package, "installed": receipt.ok}
