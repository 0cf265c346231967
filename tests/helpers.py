"""Shared test helpers for ohsome-stats tests."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from ohsome_stats.config import Config
from ohsome_stats.core.clock import FixedClock
from ohsome_stats.core.response import ResponseAssembler
from ohsome_stats.core.services import Services

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def fixed_clock() -> FixedClock:
    return FixedClock(NOW)


def make_db(rows: list[dict] | None = None) -> MagicMock:
    """Database stand-in returning canned rows from execute()."""
    db = MagicMock()
    db.execute = MagicMock(return_value=rows or [])
    return db


def make_services(repository: MagicMock | None = None, config: Config | None = None) -> Services:
    """Services with a mocked repository for route tests."""
    config = config or Config()
    return Services(
        config=config,
        db=MagicMock(),
        repository=repository or MagicMock(),
        responses=ResponseAssembler(config.attribution, api_version="test", clock=fixed_clock()),
    )
