"""Tests for NotificationService — redelivery of owed plugin notifications."""

from __future__ import annotations

from petledger.infrastructure.ledger import Ledger
from petledger.plugins import hookimpl
from petledger.plugins.event_bus import EventBus
from petledger.plugins.manager import PluginManager
from petledger.services.notifications import NotificationService
from tests.conftest import stock


class Switchable:
    def __init__(self) -> None:
        self.broken = True
        self.seen: list[int] = []

    @hookimpl
    def post_add(self, seq: int, animal: str, count: int) -> None:
        if self.broken:
            raise RuntimeError("plugin offline")
        self.seen.append(seq)


def _attach(ledger: Ledger, plugin: object, max_retries: int = 3) -> None:
    pm = PluginManager()
    pm.register(plugin)
    ledger._event_bus = EventBus(ledger.engine, pm, sync=True, max_retries=max_retries)


class TestRedeliver:
    def test_without_event_bus(self, ledger: Ledger) -> None:
        result = NotificationService(ledger).redeliver()
        assert result.error is not None
        assert result.error.code == "NO_EVENT_BUS"

    def test_nothing_owed(self, ledger: Ledger) -> None:
        _attach(ledger, Switchable())
        result = NotificationService(ledger).redeliver()
        assert result.ok
        assert result.data == {"items": [], "count": 0, "delivered": 0}

    def test_delivers_after_plugin_recovers(self, ledger: Ledger) -> None:
        plugin = Switchable()
        _attach(ledger, plugin)
        first = stock(ledger, "dog", 1)["seq"]
        second = stock(ledger, "cat", 2)["seq"]

        plugin.broken = False
        result = NotificationService(ledger).redeliver()
        assert result.ok
        assert result.data["delivered"] == 2
        assert plugin.seen == [first, second]
        assert result.warnings == []

    def test_dead_letter_is_warning(self, ledger: Ledger) -> None:
        _attach(ledger, Switchable(), max_retries=2)
        seq = stock(ledger, "dog", 1)["seq"]

        result = NotificationService(ledger).redeliver()
        assert result.data["items"] == [{"seq": seq, "kind": "added", "delivery": "dead_letter"}]
        assert result.data["delivered"] == 0
        assert len(result.warnings) == 1
        assert NotificationService(ledger).redeliver().data["count"] == 0
