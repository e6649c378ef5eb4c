"""Plugin loading for petledger.

Two sources, loaded in this order:

* installed distributions advertising the ``petledger.plugins`` entry-point
  group;
* single-file plugins in the ledger's ``.petledger/plugins/`` directory.
  Each ``*.py`` file not starting with ``_`` is imported and the module
  itself is registered, so its module-level ``@hookimpl`` functions become
  hook implementations.
"""

from __future__ import annotations

import importlib.util
import logging
import sys
from typing import TYPE_CHECKING

import pluggy

from petledger.plugins.hookspecs import PetLedgerHookSpec

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

PROJECT_NAME = "petledger"
ENTRY_POINT_GROUP = "petledger.plugins"
LOCAL_PREFIX = "petledger_local_plugin_"

logger = logging.getLogger(__name__)


class PluginManager(pluggy.PluginManager):
    """pluggy manager with the petledger hook specs registered."""

    def __init__(self) -> None:
        super().__init__(PROJECT_NAME)
        self.add_hookspecs(PetLedgerHookSpec)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then those in *local_dir*.

        Returns the names of every registered plugin.
        """
        loaded = self.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        if loaded:
            logger.debug("Loaded %d entry-point plugin(s)", loaded)
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_local(path)
        return self.plugin_names()

    def plugin_names(self) -> list[str]:
        return [name for name, _plugin in self.list_name_plugin()]

    def _load_local(self, path: Path) -> None:
        """Import and register one local plugin file.

        A file that fails to import or register is logged and skipped; it
        never stops the ledger from opening.
        """
        name = f"{LOCAL_PREFIX}{path.stem}"
        try:
            self.register(_import_file(name, path), name=name)
        except Exception:
            logger.warning("Skipping local plugin %s", path, exc_info=True)
            sys.modules.pop(name, None)
            return
        logger.debug("Registered local plugin %s", name)


def _import_file(name: str, path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[name]
        raise
    return module
