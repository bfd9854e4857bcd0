"""
Bootstrap configuration model.

Every constant the pipeline depends on lives here so a ``bootstrap.yml``
can override it. The defaults reproduce a stock macOS + zsh setup.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOMEBREW_INSTALL_URL = (
    "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
)


class BrewLocation(BaseModel):
    """A well-known Homebrew install location."""

    model_config = ConfigDict(extra="forbid")

    path: str
    label: str = ""


class NamedTool(BaseModel):
    """The extra CLI installed through Homebrew after the project tools."""

    model_config = ConfigDict(extra="forbid")

    package: str = "awscli"
    executable: str = "aws"


def _default_locations() -> list[BrewLocation]:
    return [
        BrewLocation(path="/opt/homebrew/bin/brew", label="Apple Silicon"),
        BrewLocation(path="/usr/local/bin/brew", label="Intel"),
    ]


class BootstrapConfig(BaseModel):
    """Tunable settings for a bootstrap run.

    Unknown keys are rejected: a typo such as ``rcfile:`` in
    bootstrap.yml is a validation error.
    """

    model_config = ConfigDict(extra="forbid")

    supported_os: str = "Darwin"
    homebrew_install_url: str = DEFAULT_HOMEBREW_INSTALL_URL
    homebrew_locations: list[BrewLocation] = Field(default_factory=_default_locations)

    shell: str = "zsh"
    login_profile: str = "~/.zprofile"
    rc_file: str = "~/.zshrc"

    manifest_files: list[str] = Field(
        default_factory=lambda: ["mise.toml", ".tool-versions"]
    )
    named_tool: NamedTool = Field(default_factory=NamedTool)

    upgrade_version_manager: bool = True
    version_timeout: int = 10

    @field_validator("manifest_files")
    @classmethod
    def _manifest_files_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("manifest_files must name at least one file")
        return value

    @property
    def login_profile_path(self) -> Path:
        return Path(self.login_profile).expanduser()

    @property
    def rc_file_path(self) -> Path:
        return Path(self.rc_file).expanduser()
