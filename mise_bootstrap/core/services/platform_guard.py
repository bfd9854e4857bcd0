"""Preflight — refuse to run anywhere but the supported platform."""

from __future__ import annotations

import platform
from typing import Any

from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.errors import BootstrapError


def detect_os() -> str:
    """Kernel name, as ``uname -s`` reports it (``""`` if unknown)."""
    return platform.system()


def require_supported_os(ctx: BootstrapContext) -> dict[str, Any]:
    """Fail unless the kernel name matches ``config.supported_os``."""
    detected = detect_os()
    expected = ctx.config.supported_os
    if detected != expected:
        raise BootstrapError(
            f"This script is for macOS ({expected}). Detected: {detected}"
        )
    return {"os": detected}
