"""
mise-bootstrap — CLI entrypoint.

Usage:
    mise-bootstrap              # full bootstrap (same as `run`)
    mise-bootstrap run --dry-run
    mise-bootstrap verify
    python -m mise_bootstrap.main --help
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from mise_bootstrap import __version__
from mise_bootstrap.core.observability import console
from mise_bootstrap.core.observability.logging_config import level_from_flags, setup_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mise-bootstrap")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress progress output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to bootstrap.yml (default: ./bootstrap.yml if present).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """mise-bootstrap — set up Homebrew, mise and the project's tools on macOS."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(level=level_from_flags(debug=debug, verbose=verbose, quiet=quiet))
    console.set_quiet(quiet)

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option("--dry-run", is_flag=True, help="Show what would change without changing it.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def run(ctx: click.Context, dry_run: bool, as_json: bool) -> None:
    """Run the full bootstrap."""
    from mise_bootstrap.core.engine.pipeline import run_pipeline
    from mise_bootstrap.ui.cli._common import build_context

    if as_json:
        console.set_quiet(True)

    report = run_pipeline(build_context(ctx, dry_run=dry_run, stream_output=not as_json))

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))

    if not report.ok:
        sys.exit(report.exit_code)


# ── Register sub-commands ──────────────────────────────────────

from mise_bootstrap.ui.cli.verify import manifest, verify  # noqa: E402

cli.add_command(verify)
cli.add_command(manifest)


if __name__ == "__main__":
    cli()
