"""Tests for --examples on commands and groups."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from petledger.cli import cli


class TestExamples:
    @pytest.mark.parametrize(
        "args",
        [
            ["add"],
            ["borrow"],
            ["return"],
            ["available"],
            ["init"],
            ["query"],
            ["query", "events"],
            ["redeliver"],
        ],
    )
    def test_examples_flag(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, [*args, "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "petledger" in result.output
