"""
Tests for CLI commands — run, verify, manifest and global options.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from mise_bootstrap.main import cli


@pytest.fixture
def in_project(project_dir: Path, monkeypatch) -> Path:
    monkeypatch.chdir(project_dir)
    return project_dir


@pytest.fixture
def mocked_registry(registry, config):
    """Route the CLI to the mock-shell registry and the tmp-home config."""

    def _default_registry(dry_run: bool = False):
        registry.dry_run = dry_run
        return registry

    with patch("mise_bootstrap.adapters.registry.default_registry", side_effect=_default_registry), \
            patch("mise_bootstrap.core.config.loader.load_config", return_value=config):
        yield registry


class TestCLIGlobal:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "mise-bootstrap" in result.output
        for command in ("run", "verify", "manifest"):
            assert command in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_missing_config_file(self, in_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", "nope.yml", "manifest"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestRunCommand:
    def test_bare_invocation_runs_pipeline(self, in_project, mocked_registry):
        runner = CliRunner()
        with patch("platform.system", return_value="Linux"):
            result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "This script is for macOS (Darwin). Detected: Linux" in result.output

    def test_success(self, in_project, mocked_registry, installed_tools, fake_brew):
        installed_tools("brew", "mise", "aws", "foo", "bar")
        runner = CliRunner()
        with patch("platform.system", return_value="Darwin"):
            result = runner.invoke(cli, ["run"])
        assert result.exit_code == 0, result.output
        assert "[mise-setup] Done." in result.output

    def test_missing_manifest_exits_1(self, in_project, mocked_registry, installed_tools, fake_brew):
        installed_tools("brew", "mise", "aws")
        (in_project / "mise.toml").unlink()
        runner = CliRunner()
        with patch("platform.system", return_value="Darwin"):
            result = runner.invoke(cli, ["run"])
        assert result.exit_code == 1
        assert "No mise.toml or .tool-versions found" in result.output

    def test_dry_run_json(self, in_project, mocked_registry, installed_tools):
        installed_tools("foo", "bar")
        runner = CliRunner()
        with patch("platform.system", return_value="Darwin"):
            result = runner.invoke(cli, ["run", "--dry-run", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["status"] == "ok"
        assert data["dry_run"] is True
        assert [s["name"] for s in data["steps"]][-1] == "verify_tools"


class TestVerifyCommand:
    def test_verify(self, in_project, mocked_registry, installed_tools):
        installed_tools("foo")
        runner = CliRunner()
        result = runner.invoke(cli, ["verify"])
        assert result.exit_code == 0
        assert "foo version:" in result.output
        assert "bar is not installed or not on PATH." in result.output

    def test_verify_json(self, in_project, mocked_registry, installed_tools):
        installed_tools("foo", "bar")
        runner = CliRunner()
        result = runner.invoke(cli, ["verify", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [t["name"] for t in data["tools"]] == ["foo", "bar"]
        assert data["missing"] == []

    def test_verify_without_manifest(self, tmp_path, monkeypatch, mocked_registry):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["verify"])
        assert result.exit_code == 1
        assert "No mise.toml or .tool-versions found" in result.output


class TestManifestCommand:
    def test_manifest(self, in_project):
        runner = CliRunner()
        result = runner.invoke(cli, ["manifest"])
        assert result.exit_code == 0
        assert "mise.toml" in result.output
        assert "foo  1.0" in result.output
        assert "bar  2.0" in result.output

    def test_manifest_json(self, in_project):
        runner = CliRunner()
        result = runner.invoke(cli, ["manifest", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["kind"] == "mise.toml"
        assert data["tools"] == {"foo": "1.0", "bar": "2.0"}

    def test_empty_manifest(self, in_project):
        (in_project / "mise.toml").write_text("[tools]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["manifest"])
        assert result.exit_code == 0
        assert "no tools declared" in result.output
