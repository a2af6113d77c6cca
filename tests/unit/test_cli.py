"""Tests for the triadcalc CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from triadcalc.cli import app


@pytest.fixture
def cli_runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Return a CLI test runner isolated from local config and environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TRIADCALC_MAX_DEPTH", raising=False)
    monkeypatch.delenv("TRIADCALC_LOG_LEVEL", raising=False)
    return CliRunner()


class TestSolveCommand:
    def test_solves_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["2+3*4"])
        assert result.exit_code == 0
        assert "You entered: 2+3*4" in result.output
        assert "Solved: 20" in result.output

    def test_error_exits_normally(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1/0"])
        assert result.exit_code == 0
        assert "Error while solving: Division by zero" in result.output

    def test_fail_on_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--fail-on-error", "1/0"])
        assert result.exit_code == 1

    def test_fail_on_error_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--fail-on-error", "1+1"])
        assert result.exit_code == 0
        assert "Solved: 2" in result.output

    def test_prompts_until_non_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [], input="\n  \n(2+3)*4\n")
        assert result.exit_code == 0
        assert "Enter the equation" in result.output
        assert "Solved: 20" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--json", "3+4.5"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["value"] == "7.5"
        assert data["kind"] == "decimal"

    def test_show_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--show-tokens", "2*(3+4)"])
        assert result.exit_code == 0
        assert "group (3+4)" in result.output
        assert "operator *" in result.output
        assert "Solved: 14" in result.output

    def test_max_depth_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--max-depth", "1", "((1+1))"])
        assert result.exit_code == 0
        assert "Error while solving: Parentheses nest deeper than 1 levels" in result.output

    def test_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "calc.toml"
        config.write_text("[calc]\nmax_depth = 1\n")
        result = cli_runner.invoke(app, ["--config", str(config), "((1+1))"])
        assert "Parentheses nest deeper" in result.output

    def test_invalid_config_exits_2(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--max-depth", "0", "1+1"])
        assert result.exit_code == 2

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "triadcalc" in result.output


class TestVersion:
    def test_uninstalled_package_reports_placeholder(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import triadcalc
        from importlib.metadata import PackageNotFoundError

        def _missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(triadcalc, "_metadata_version", _missing)
        assert triadcalc._get_version() == "0.0.0"

    def test_installed_version_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import triadcalc

        monkeypatch.setattr(triadcalc, "_metadata_version", lambda name: "9.9.9")
        assert triadcalc._get_version() == "9.9.9"
