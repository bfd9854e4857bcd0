"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from mise_bootstrap.core.observability import console


def build_context(ctx: click.Context, dry_run: bool = False, stream_output: bool = True):
    """Load config and wire the default registry for the current directory.

    ``stream_output=False`` keeps installer output off stdout (``--json``).
    Exits with code 1 on a configuration error.
    """
    from mise_bootstrap.adapters.registry import default_registry
    from mise_bootstrap.core.config.loader import ConfigError, load_config
    from mise_bootstrap.core.context import BootstrapContext

    try:
        config = load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)

    return BootstrapContext(
        config=config,
        registry=default_registry(dry_run=dry_run),
        project_dir=Path.cwd(),
        stream_output=stream_output,
    )
