"""
Tool lookups — PATH checks, ``--version`` queries, and environment loading.

``have`` is the ``command -v`` of the bootstrap: it consults the live
``os.environ["PATH"]``, so tools become visible as soon as
``load_shell_exports`` has pulled a ``shellenv``/``activate`` snippet
into the current process.
"""

from __future__ import annotations

import logging
import os
import shutil
from typing import TYPE_CHECKING

from mise_bootstrap.core.observability import console

if TYPE_CHECKING:
    from mise_bootstrap.core.context import BootstrapContext

logger = logging.getLogger(__name__)

# Variables a bash subshell sets for itself; never copy them back.
_SHELL_INTERNAL = frozenset({"_", "SHLVL", "PWD", "OLDPWD"})


def have(cli: str) -> bool:
    """Whether ``cli`` resolves on the current PATH."""
    return shutil.which(cli) is not None


def query_version(ctx: BootstrapContext, cli: str, action_id: str) -> str | None:
    """First line of ``<cli> --version``, or None if the query fails."""
    receipt = ctx.shell(
        action_id,
        [cli, "--version"],
        mutating=False,
        timeout=ctx.config.version_timeout,
    )
    if not receipt.ok:
        logger.debug("%s --version failed: %s", cli, receipt.error)
        return None
    return receipt.first_line or None


def parse_env_dump(text: str) -> dict[str, str]:
    """Parse ``env -0`` output into a mapping."""
    env: dict[str, str] = {}
    for entry in text.split("\0"):
        if "=" not in entry:
            continue
        key, _, value = entry.partition("=")
        key = key.strip()
        if key:
            env[key] = value
    return env


def load_shell_exports(
    ctx: BootstrapContext,
    action_id: str,
    snippet: str,
) -> dict[str, str]:
    """Evaluate the output of ``snippet`` in bash and adopt the resulting env.

    Only variables the snippet added or changed are copied into
    ``os.environ``. If the snippet command itself fails (for example
    ``mise`` is not on PATH yet) a warning is printed and nothing changes.

    Returns:
        The variables that were updated.
    """
    receipt = ctx.shell(
        action_id,
        ["/bin/bash", "-c", f'out="$({snippet})" && eval "$out" && env -0'],
        name=f"load environment from {snippet}",
        mutating=False,
    )
    if not receipt.ok:
        console.warn(f"Could not load environment from `{snippet}`: {receipt.error}")
        return {}

    changed: dict[str, str] = {}
    for key, value in parse_env_dump(receipt.output).items():
        if key in _SHELL_INTERNAL or os.environ.get(key) == value:
            continue
        os.environ[key] = value
        changed[key] = value

    logger.debug("Loaded %d variables from %r", len(changed), snippet)
    return changed
