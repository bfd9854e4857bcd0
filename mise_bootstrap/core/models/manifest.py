"""
Tool manifest model — the project's pinned tool versions.

Read-only: manifests are only ever produced by parsing a project file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class ToolManifest(BaseModel):
    """Tools declared by ``mise.toml`` or ``.tool-versions``."""

    path: Path
    kind: Literal["mise.toml", "tool-versions"] = "mise.toml"
    tools: dict[str, str] = Field(default_factory=dict)  # name → constraint

    @property
    def tool_names(self) -> list[str]:
        """Declared tool names, in file order."""
        return list(self.tools)

    def __len__(self) -> int:
        return len(self.tools)
