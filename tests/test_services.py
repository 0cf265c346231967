"""Tests for ohsome_stats.core.services."""

from unittest.mock import MagicMock

import pytest

from ohsome_stats.config import Config, QueryConfig
from ohsome_stats.core.repository import StatsRepository
from ohsome_stats.core.services import create_services
from ohsome_stats.query.clickhouse import ClickHouseDialect
from tests.helpers import NOW, fixed_clock


def test_create_services_wires_components():
    config = Config(query=QueryConfig(table="stats_test", default_limit=7))
    db = MagicMock()
    svc = create_services(config=config, db=db, clock=fixed_clock())

    assert svc.db is db
    assert isinstance(svc.repository, StatsRepository)
    assert isinstance(svc.repository.dialect, ClickHouseDialect)
    assert svc.repository.builder.table == "stats_test"
    assert svc.repository.default_limit == 7
    assert svc.repository.clock.now() == NOW
    assert svc.responses.clock.now() == NOW


def test_unknown_dialect_fails_fast():
    config = Config(query=QueryConfig(dialect="oracle"))
    with pytest.raises(ValueError, match="oracle"):
        create_services(config=config, db=MagicMock())
