"""
Shared test fixtures and configuration.

Nothing here touches the real home directory or runs a real installer:
dotfiles live under ``tmp_path`` and the ``shell`` adapter is a mock.
"""

from pathlib import Path

import pytest

from mise_bootstrap.adapters.mock import MockAdapter
from mise_bootstrap.adapters.registry import AdapterRegistry
from mise_bootstrap.adapters.shell.filesystem import FilesystemAdapter
from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.models.config import BootstrapConfig, BrewLocation
from mise_bootstrap.core.observability import console


@pytest.fixture(autouse=True)
def _reset_console():
    console.set_quiet(False)
    yield
    console.set_quiet(False)


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """A throwaway $HOME."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with a two-tool mise.toml."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "mise.toml").write_text('[tools]\nfoo = "1.0"\nbar = "2.0"\n')
    return project


@pytest.fixture
def brew_path(tmp_path: Path) -> Path:
    """Where the fake Homebrew lives (not created until ``fake_brew``)."""
    return tmp_path / "opt" / "homebrew" / "bin" / "brew"


@pytest.fixture
def fake_brew(brew_path: Path) -> Path:
    """An executable stand-in at the configured Homebrew location."""
    brew_path.parent.mkdir(parents=True)
    brew_path.write_text("#!/bin/sh\nexit 0\n")
    brew_path.chmod(0o755)
    return brew_path


@pytest.fixture
def config(home: Path, brew_path: Path) -> BootstrapConfig:
    return BootstrapConfig(
        login_profile=str(home / ".zprofile"),
        rc_file=str(home / ".zshrc"),
        homebrew_locations=[BrewLocation(path=str(brew_path), label="Apple Silicon")],
    )


@pytest.fixture
def shell_mock() -> MockAdapter:
    return MockAdapter(adapter_name="shell")


@pytest.fixture
def registry(shell_mock: MockAdapter) -> AdapterRegistry:
    """Mock shell, real filesystem."""
    reg = AdapterRegistry()
    reg.register(shell_mock)
    reg.register(FilesystemAdapter())
    return reg


@pytest.fixture
def bctx(config: BootstrapConfig, registry: AdapterRegistry, project_dir: Path) -> BootstrapContext:
    return BootstrapContext(config=config, registry=registry, project_dir=project_dir)


@pytest.fixture
def installed_tools(monkeypatch):
    """Make ``shutil.which`` resolve only the tools passed in.

    Usage: ``installed_tools("brew", "mise")``.
    """

    def _install(*names: str) -> None:
        def _which(cmd, *args, **kwargs):
            return f"/usr/local/bin/{cmd}" if cmd in names else None

        monkeypatch.setattr("shutil.which", _which)

    return _install
