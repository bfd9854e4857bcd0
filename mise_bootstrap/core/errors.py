"""
Fatal bootstrap errors.

Anything raised as ``BootstrapError`` aborts the pipeline with exit
code 1. Tolerated failures are logged as warnings instead.
"""

from __future__ import annotations


class BootstrapError(Exception):
    """A fatal failure in a bootstrap step."""


class ManifestError(BootstrapError):
    """No usable tool manifest in the project directory."""
