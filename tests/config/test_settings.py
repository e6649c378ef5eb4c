"""Tests for LedgerSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from petledger.config.settings import LedgerSettings


class TestLedgerSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = LedgerSettings.from_cli(ledger_root=tmp_path)
        assert settings.ledger_root == tmp_path
        assert settings.caller is None
        assert settings.json_output is False
        assert settings.sync is False
        assert settings.ledger.name == "petledger"
        assert settings.events.max_retries == 3
        assert settings.output.width == 100

    def test_frozen(self, tmp_path: Path) -> None:
        settings = LedgerSettings.from_cli(ledger_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "petledger.toml").write_text(
            '[ledger]\nname = "shop"\nadmin = "keeper"\n[events]\nmax_workers = 4\n'
        )
        settings = LedgerSettings.from_cli(ledger_root=tmp_path)
        assert settings.ledger.name == "shop"
        assert settings.ledger.admin == "keeper"
        assert settings.events.max_workers == 4
        assert settings.events.max_retries == 3

    def test_root_from_config_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "petledger.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = LedgerSettings.from_cli()
        assert settings.ledger_root.resolve() == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nwidth = 120\n")
        settings = LedgerSettings.from_cli(config_path=str(custom), ledger_root=tmp_path)
        assert settings.output.width == 120
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "petledger.toml").write_text("[ledger\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LedgerSettings.from_cli(ledger_root=tmp_path)


class TestPriority:
    def test_env_over_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "petledger.toml").write_text("[output]\nwidth = 120\n")
        monkeypatch.setenv("PETLEDGER_OUTPUT__WIDTH", "80")
        settings = LedgerSettings.from_cli(ledger_root=tmp_path)
        assert settings.output.width == 80

    def test_caller_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PETLEDGER_CALLER", "alice")
        settings = LedgerSettings.from_cli(ledger_root=tmp_path)
        assert settings.caller == "alice"

    def test_cli_over_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PETLEDGER_CALLER", "alice")
        settings = LedgerSettings.from_cli(ledger_root=tmp_path, caller="bob")
        assert settings.caller == "bob"

    def test_none_flags_dropped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PETLEDGER_CALLER", "alice")
        settings = LedgerSettings.from_cli(ledger_root=tmp_path, caller=None)
        assert settings.caller == "alice"
