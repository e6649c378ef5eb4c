"""LedgerSettings: one frozen object built from flags, environment and TOML.

Sources, strongest first:

1. keyword arguments (Click flags; ``None`` means "not given")
2. ``PETLEDGER_*`` environment variables, ``__`` for nested sections
3. the ``petledger.toml`` in effect for the ledger directory
4. the defaults on the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from petledger.config.discovery import find_config, read_config
from petledger.config.models import EventsConfig, LedgerConfig, OutputConfig

# Parsed TOML for the settings object under construction.
_file_values: ContextVar[dict[str, Any] | None] = ContextVar("petledger_file_values", default=None)


class LedgerSettings(BaseSettings):
    """Everything a command needs to know before it opens the ledger.

    Attributes:
        ledger_root: Directory holding ``petledger.toml`` and ``.petledger/``.
        config_path: The TOML file that was read, if any.
        caller: Identity of whoever runs the command.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PETLEDGER_",
        "env_nested_delimiter": "__",
    }

    ledger_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    caller: str | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False
    sync: bool = False

    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        file_settings = InitSettingsSource(settings_cls, init_kwargs=_file_values.get() or {})
        return init_settings, env_settings, file_settings

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        ledger_root: Path | None = None,
        **flags: Any,
    ) -> LedgerSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* wins over discovery; otherwise the config
        is looked up from *ledger_root* (or the cwd). Without an explicit
        *ledger_root* the ledger lives beside the config file that was found.
        """
        if config_path:
            toml_path = Path(config_path) if Path(config_path).is_file() else None
        else:
            toml_path = find_config(ledger_root)

        if ledger_root is None:
            ledger_root = toml_path.parent if toml_path is not None else Path.cwd()

        token = _file_values.set(read_config(toml_path))
        try:
            return cls(
                ledger_root=ledger_root,
                config_path=toml_path,
                **{key: value for key, value in flags.items() if value is not None},
            )
        finally:
            _file_values.reset(token)
