"""
Console output — the ``[mise-setup]`` progress lines.

Progress goes to stdout, warnings and errors to stderr. Quiet mode
drops progress lines only.
"""

from __future__ import annotations

import click

PREFIX = "[mise-setup]"

_quiet = False


def set_quiet(enabled: bool) -> None:
    global _quiet
    _quiet = enabled


def log(message: str) -> None:
    if not _quiet:
        click.echo(f"{PREFIX} {message}")


def warn(message: str) -> None:
    click.secho(f"{PREFIX}[WARN] {message}", fg="yellow", err=True)


def error(message: str) -> None:
    click.secho(f"{PREFIX}[ERROR] {message}", fg="red", err=True)
