"""pluggy plugins that observe committed ledger notifications.

Write hooks with :data:`hookimpl`; see :mod:`petledger.plugins.hookspecs`
for the hooks and :mod:`petledger.plugins.manager` for where plugins are
loaded from. A failing plugin produces a warning, never a failed command.
"""

import pluggy

from petledger.plugins.event_bus import EventBus
from petledger.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("petledger")

__all__ = ["EventBus", "PluginManager", "hookimpl"]
