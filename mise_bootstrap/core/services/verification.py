"""
Verification — report each manifest tool's version, or that it is missing.

Missing tools and failing version queries are warnings, never fatal;
only a missing manifest stops the report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mise_bootstrap.core.config.manifest import load_manifest, require_manifest
from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.observability import console
from mise_bootstrap.core.services.tool_lookup import have, query_version

UNKNOWN_VERSION = "Unknown version"


@dataclass
class ToolStatus:
    name: str
    constraint: str = ""
    installed: bool = False
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "constraint": self.constraint,
            "installed": self.installed,
            "version": self.version,
        }


@dataclass
class VerificationReport:
    manifest: str = ""
    tools: list[ToolStatus] = field(default_factory=list)

    @property
    def missing(self) -> list[str]:
        return [t.name for t in self.tools if not t.installed]

    @property
    def all_installed(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict[str, Any]:
        return {
            "manifest": self.manifest,
            "tools": [t.to_dict() for t in self.tools],
            "missing": self.missing,
        }


def verify_tools(ctx: BootstrapContext) -> VerificationReport:
    """Check every tool the manifest declares.

    Raises:
        ManifestError: If the project has no recognised manifest.
    """
    path = require_manifest(ctx.config.manifest_files, ctx.project_dir)
    console.log(f"Verifying tools listed in {path.name}…")
    manifest = load_manifest(path)

    report = VerificationReport(manifest=str(path))
    for name, constraint in manifest.tools.items():
        status = ToolStatus(name=name, constraint=constraint)
        if have(name):
            status.installed = True
            status.version = query_version(ctx, name, f"verify:{name}") or UNKNOWN_VERSION
            console.log(f"{name} version: {status.version}")
        else:
            console.warn(f"{name} is not installed or not on PATH.")
        report.tools.append(status)

    return report


def verify_step(ctx: BootstrapContext) -> dict[str, Any]:
    return verify_tools(ctx).to_dict()
