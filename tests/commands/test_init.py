"""Tests for the init command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from petledger.cli import cli


@pytest.mark.usefixtures("_isolated_ledger")
class TestInitCommand:
    def test_init_with_admin(self, cli_runner: CliRunner, ledger_root: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--no-interact", "init", "--name", "shop", "--admin", "keeper"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["admin"] == "keeper"
        assert (ledger_root / "petledger.toml").is_file()

    def test_admin_defaults_to_caller(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "--no-interact", "-u", "boss", "init"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["admin"] == "boss"

    def test_name_defaults_to_directory(self, cli_runner: CliRunner, ledger_root: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--no-interact", "init", "sub", "--admin", "keeper"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["name"] == "sub"
        assert Path(data["path"]) == (ledger_root / "sub").resolve()

    def test_no_interact_requires_admin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--no-interact", "init"])
        assert result.exit_code == 2
        assert "--admin" in result.output

    def test_prompts_for_admin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["init"], input="shop\nkeeper\n")
        assert result.exit_code == 0, result.output
        assert "admin: keeper" in result.output

    def test_second_init_fails(self, cli_runner: CliRunner) -> None:
        args = ["--no-interact", "init", "--admin", "keeper"]
        assert cli_runner.invoke(cli, args).exit_code == 0
        result = cli_runner.invoke(cli, [*args[:-1], "usurper"])
        assert result.exit_code == 1
        assert "ALREADY_INITIALIZED" in result.output
