"""
CLI commands for inspecting the project manifest.

Thin wrappers over ``mise_bootstrap.core.services.verification`` and
``mise_bootstrap.core.config.manifest``.
"""

from __future__ import annotations

import json
import sys

import click

from mise_bootstrap.core.errors import BootstrapError
from mise_bootstrap.core.observability import console
from mise_bootstrap.ui.cli._common import build_context


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def verify(ctx: click.Context, as_json: bool) -> None:
    """Check that every tool in the manifest is on PATH."""
    from mise_bootstrap.core.services.verification import verify_tools

    if as_json:
        console.set_quiet(True)

    bctx = build_context(ctx)
    try:
        report = verify_tools(bctx)
    except BootstrapError as e:
        console.error(str(e))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def manifest(ctx: click.Context, as_json: bool) -> None:
    """Show the tools the project manifest declares."""
    from mise_bootstrap.core.config.manifest import load_manifest, require_manifest

    bctx = build_context(ctx)
    try:
        parsed = load_manifest(require_manifest(bctx.config.manifest_files, bctx.project_dir))
    except BootstrapError as e:
        console.error(str(e))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({
            "manifest": str(parsed.path),
            "kind": parsed.kind,
            "tools": parsed.tools,
        }, indent=2))
        return

    click.secho(f"📄 {parsed.path.name}", fg="cyan", bold=True)
    if not parsed.tools:
        click.secho("   (no tools declared)", fg="yellow")
        return
    for name, constraint in parsed.tools.items():
        click.echo(f"   • {name}  {constraint}")
