"""StatsRepository: hashtag statistics from the analytical engine.

Each method builds one neutral query, renders it with the configured
dialect, runs it as a single read and maps the rows into records.
Missing time bounds are resolved per call (start -> epoch, end -> now).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from ohsome_stats.core.clock import Clock, SystemClock, TimeRange
from ohsome_stats.core.exceptions import QueryExecutionError
from ohsome_stats.core.hashtag import HashtagExpression
from ohsome_stats.core.interval import translate_interval
from ohsome_stats.core.models import (
    AggregateRecord, HashtagUsageRecord, IntervalRecord, MetadataRecord,
)
from ohsome_stats.query.builder import QueryBuilder
from ohsome_stats.query.interface import Dialect, StatsQuery

if TYPE_CHECKING:
    from ohsome_stats.config import QueryConfig
    from ohsome_stats.storage.database import Database

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_INTERVAL = "P1M"


class StatsRepository:
    """Read-only query layer for hashtag statistics."""

    def __init__(
        self,
        db: Database,
        dialect: Dialect,
        *,
        clock: Clock | None = None,
        query_config: QueryConfig | None = None,
    ):
        self.db = db
        self.dialect = dialect
        self.clock = clock or SystemClock()
        self.builder = QueryBuilder(table=query_config.table if query_config else "stats")
        self.default_limit = query_config.default_limit if query_config else DEFAULT_LIMIT
        self.default_interval = query_config.default_interval if query_config else DEFAULT_INTERVAL

    def _run(self, query: StatsQuery) -> list[dict]:
        rendered = self.dialect.render(query)
        logger.debug("SQL: %s | params=%s", rendered.sql, rendered.params)
        return self.db.execute(rendered.sql, rendered.params)

    def get_stats_for_time_span(
        self,
        expr: HashtagExpression,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> dict:
        """Aggregate statistics for a hashtag within a time span.

        Always returns one record (zero counts when nothing matches) with
        the normalized tag injected under ``hashtag``.
        """
        time_range = TimeRange.resolve(start, end, self.clock)
        logger.info(
            "Getting stats for hashtag: %s (wildcard=%s), startDate: %s, endDate: %s",
            expr.tag, expr.is_wildcard, time_range.start, time_range.end,
        )

        rows = self._run(self.builder.point_aggregate(expr, time_range))
        if not rows:
            raise QueryExecutionError("Aggregate query returned no row")
        return AggregateRecord.from_row(rows[0]).to_dict() | {"hashtag": expr.tag}

    def get_stats_for_time_span_interval(
        self,
        expr: HashtagExpression,
        start: datetime | None = None,
        end: datetime | None = None,
        interval: str | None = None,
    ) -> list[dict]:
        """Aggregate statistics per time bucket.

        Only buckets containing at least one matching edit are returned.
        Raises InvalidIntervalError before querying if the token is unsupported.
        """
        token = interval or self.default_interval
        native = translate_interval(token)
        time_range = TimeRange.resolve(start, end, self.clock)
        logger.info(
            "Getting stats for hashtag: %s, startDate: %s, endDate: %s, interval: %s",
            expr.tag, time_range.start, time_range.end, token,
        )

        rows = self._run(self.builder.interval_aggregate(expr, time_range, native))
        return [IntervalRecord.from_row(row).to_dict() for row in rows]

    def get_most_used_hashtags(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> list[dict]:
        """Hashtags ranked by distinct user count, ties broken by name."""
        limit = limit if limit is not None else self.default_limit
        time_range = TimeRange.resolve(start, end, self.clock)
        logger.info(
            "Getting most used hashtags startDate: %s, endDate: %s, limit: %d",
            time_range.start, time_range.end, limit,
        )

        rows = self._run(self.builder.most_used_hashtags(time_range, limit))
        return [HashtagUsageRecord.from_row(row).to_dict() for row in rows]

    def get_metadata(self) -> dict:
        """Minimum and maximum changeset timestamp of the whole dataset."""
        logger.info("Getting dataset metadata")
        rows = self._run(self.builder.metadata())
        if not rows:
            raise QueryExecutionError("Metadata query returned no row")
        return MetadataRecord.from_row(rows[0]).to_dict()
