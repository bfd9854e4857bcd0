"""
Package-manager bootstrap — Homebrew.

Installs Homebrew with its official non-interactive installer when it
is missing, then wires whichever install location exists (Apple
Silicon or Intel prefix) into the current process and the login
profile.

Official Homebrew: https://brew.sh
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.errors import BootstrapError
from mise_bootstrap.core.models.config import BrewLocation
from mise_bootstrap.core.observability import console
from mise_bootstrap.core.services.tool_lookup import have, load_shell_exports, query_version


def find_brew(locations: list[BrewLocation]) -> BrewLocation | None:
    """First well-known location holding an executable ``brew``."""
    for location in locations:
        path = Path(location.path)
        if path.is_file() and os.access(path, os.X_OK):
            return location
    return None


def brew_activation_line(brew_path: str) -> str:
    return f'eval "$({brew_path} shellenv)"'


def ensure_brew(ctx: BootstrapContext) -> dict[str, Any]:
    """Install Homebrew if needed and put it on PATH.

    Raises:
        BootstrapError: If the installer fails or the login profile
            cannot be written.
    """
    result: dict[str, Any] = {"installed": False}

    if have("brew"):
        version = query_version(ctx, "brew", "brew:version")
        console.log(f"Homebrew found: {version or 'Unknown version'}")
        result["version"] = version
    else:
        console.log("Installing Homebrew…")
        url = ctx.config.homebrew_install_url
        receipt = ctx.shell(
            "brew:install",
            f'/bin/bash -c "$(curl -fsSL {url})"',
            name="Homebrew installer",
            env={"NONINTERACTIVE": "1"},
        )
        if receipt.failed:
            raise BootstrapError(f"Homebrew installation failed: {receipt.error}")
        if receipt.skipped:
            console.log(receipt.output)
        result["installed"] = receipt.ok

    location = find_brew(ctx.config.homebrew_locations)
    if location is None:
        if not ctx.dry_run:
            console.warn(
                "brew not found at "
                + ", ".join(loc.path for loc in ctx.config.homebrew_locations)
                + "; PATH left unchanged."
            )
        return result

    result["location"] = location.path
    result["exported"] = sorted(
        load_shell_exports(ctx, "brew:shellenv", f"'{location.path}' shellenv")
    )

    profile = ctx.config.login_profile_path
    receipt = ctx.ensure_line(
        "brew:profile",
        profile,
        brew_activation_line(location.path),
        header=f"Homebrew ({location.label})" if location.label else "Homebrew",
    )
    if receipt.failed:
        raise BootstrapError(f"Could not update {profile}: {receipt.error}")
    if receipt.metadata.get("added"):
        console.log(f"Appended Homebrew activation to {profile}")

    result["profile"] = str(profile)
    return result
