"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from petledger.config.models import EventsConfig, LedgerConfig, OutputConfig


class TestModels:
    def test_defaults(self) -> None:
        assert LedgerConfig().admin is None
        assert EventsConfig().max_workers == 2
        assert OutputConfig().width == 100

    def test_sparse_override(self) -> None:
        events = EventsConfig.model_validate({"max_retries": 5})
        assert events.max_retries == 5
        assert events.max_workers == 2

    def test_bounds(self) -> None:
        with pytest.raises(ValidationError):
            EventsConfig(max_retries=0)
        with pytest.raises(ValidationError):
            OutputConfig(width=10)
