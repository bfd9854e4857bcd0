"""
Manifest discovery and parsing.

Both the trust step and the verification step go through
``find_manifest`` so they accept exactly the same files.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from mise_bootstrap.core.errors import ManifestError
from mise_bootstrap.core.models.manifest import ToolManifest

logger = logging.getLogger(__name__)

# A top-level ``key = value`` line in mise.toml
_MISE_KEY_RE = re.compile(r"^([A-Za-z0-9_-]+)\s*=\s*(.*)$")


def find_manifest(
    manifest_files: list[str],
    project_dir: Path | None = None,
) -> Path | None:
    """Return the first existing manifest in ``project_dir``, or None."""
    base = project_dir or Path.cwd()
    for name in manifest_files:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def require_manifest(
    manifest_files: list[str],
    project_dir: Path | None = None,
) -> Path:
    """Like ``find_manifest`` but fatal when nothing is found."""
    path = find_manifest(manifest_files, project_dir)
    if path is None:
        names = " or ".join(manifest_files)
        raise ManifestError(f"No {names} found. Please add one to the project.")
    return path


def _unquote(value: str) -> str:
    value = value.strip()
    if value[:1] in ("'", '"'):
        end = value.find(value[0], 1)
        return value[1:end] if end != -1 else value[1:]
    return value.split("#", 1)[0].strip()


def parse_mise_toml(text: str) -> dict[str, str]:
    """Extract ``name → constraint`` from every ``key = value`` line.

    Section headers are ignored, so keys from any table are reported.
    Repeated keys keep their first value.
    """
    tools: dict[str, str] = {}
    for line in text.splitlines():
        m = _MISE_KEY_RE.match(line)
        if not m:
            continue
        name = m.group(1)
        if name not in tools:
            tools[name] = _unquote(m.group(2).strip())
    return tools


def parse_tool_versions(text: str) -> dict[str, str]:
    """Extract ``name → versions`` from an asdf-style ``.tool-versions``."""
    tools: dict[str, str] = {}
    for line in text.splitlines():
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if parts[0] not in tools:
            tools[parts[0]] = " ".join(parts[1:])
    return tools


def load_manifest(path: Path) -> ToolManifest:
    """Read and parse a manifest file.

    Raises:
        ManifestError: If the file cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e

    if path.name == ".tool-versions":
        manifest = ToolManifest(path=path, kind="tool-versions", tools=parse_tool_versions(text))
    else:
        manifest = ToolManifest(path=path, kind="mise.toml", tools=parse_mise_toml(text))

    logger.debug("Parsed %d tools from %s", len(manifest), path)
    return manifest
