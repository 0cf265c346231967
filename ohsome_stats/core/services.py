"""Service container and factory. Centralizes component initialization."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ohsome_stats.config import Config, load_config
from ohsome_stats.core.clock import Clock, SystemClock
from ohsome_stats.core.repository import StatsRepository
from ohsome_stats.core.response import ResponseAssembler
from ohsome_stats.query import get_dialect
from ohsome_stats.storage.database import Database

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Holds all initialized stats components."""

    config: Config
    db: Database
    repository: StatsRepository
    responses: ResponseAssembler


def create_services(
    config: Config | None = None,
    db: Database | None = None,
    clock: Clock | None = None,
) -> Services:
    """Build all services from config.

    Args:
        config: Configuration to use. Loads from env if None.
        db: Pre-connected database. Creates new (unconnected) one if None.
        clock: Source of "now" for default end dates. System clock if None.
    """
    if config is None:
        config = load_config()
    if db is None:
        db = Database(config.db)
    if clock is None:
        clock = SystemClock()

    dialect = get_dialect(config.query.dialect)
    repository = StatsRepository(db, dialect, clock=clock, query_config=config.query)
    responses = ResponseAssembler(config.attribution, clock=clock)
    logger.info("Services ready (dialect=%s, table=%s)", dialect.name, config.query.table)

    return Services(config=config, db=db, repository=repository, responses=responses)
