"""Tests for InventoryRepository."""

from __future__ import annotations

import pytest

from petledger.domain.errors import InvalidAnimalError, OutOfStockError
from petledger.domain.types import STOCKABLE_ANIMALS, AnimalType
from petledger.infrastructure.ledger import Ledger


class TestInventoryRepository:
    def test_none_is_always_zero(self, ledger: Ledger) -> None:
        with ledger.reader() as view:
            assert view.inventory.available(AnimalType.NONE) == 0

    def test_add_returns_new_count(self, ledger: Ledger) -> None:
        with ledger.transaction() as txn:
            assert txn.inventory.add(AnimalType.CAT, 2) == 2
            assert txn.inventory.add(AnimalType.CAT, 3) == 5

    def test_add_zero(self, ledger: Ledger) -> None:
        with ledger.transaction() as txn:
            assert txn.inventory.add(AnimalType.CAT, 0) == 0

    def test_add_none_rejected(self, ledger: Ledger) -> None:
        with pytest.raises(InvalidAnimalError), ledger.transaction() as txn:
            txn.inventory.add(AnimalType.NONE, 1)

    def test_decrement(self, ledger: Ledger) -> None:
        with ledger.transaction() as txn:
            txn.inventory.add(AnimalType.DOG, 1)
            assert txn.inventory.decrement(AnimalType.DOG) == 0

    def test_decrement_empty(self, ledger: Ledger) -> None:
        with pytest.raises(OutOfStockError, match="no dog available"), ledger.transaction() as txn:
            txn.inventory.decrement(AnimalType.DOG)

    def test_increment(self, ledger: Ledger) -> None:
        with ledger.transaction() as txn:
            assert txn.inventory.increment(AnimalType.FISH) == 1

    def test_snapshot_excludes_none(self, ledger: Ledger) -> None:
        with ledger.transaction() as txn:
            txn.inventory.add(AnimalType.PARROT, 7)
        with ledger.reader() as view:
            snap = view.inventory.snapshot()
        assert list(snap) == list(STOCKABLE_ANIMALS)
        assert snap[AnimalType.PARROT] == 7
