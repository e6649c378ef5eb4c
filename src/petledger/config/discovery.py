"""Locating, reading and writing ``petledger.toml``.

A ledger directory is marked by its config file. Commands run from any
subdirectory find it by walking up, the same way git finds ``.git/``.
``PETLEDGER_CONFIG`` points at a file directly and disables the walk.
"""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "petledger.toml"
CONFIG_ENV_VAR = "PETLEDGER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``petledger.toml`` at or above *start* (default: cwd).

    When ``PETLEDGER_CONFIG`` is set, returns that file if it exists and
    None otherwise.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw section tables. A missing file reads as empty.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def render_config(name: str, admin: str) -> str:
    """Text of the ``petledger.toml`` written by ``init``."""
    return f"[ledger]\nname = {json.dumps(name)}\nadmin = {json.dumps(admin)}\n"
