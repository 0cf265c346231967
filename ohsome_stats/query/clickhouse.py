"""ClickHouse dialect.

Parameters use ``%s`` placeholders and are merged client-side by psycopg,
so timestamps are bound as UTC strings and parsed by the engine with
``parseDateTimeBestEffortOrNull(..., 'UTC')``, independent of the server
timezone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ohsome_stats.core.clock import as_utc
from ohsome_stats.query.interface import (
    BUCKET_END, BUCKET_START, COLUMN, COUNT, COUNT_ALL, COUNT_DISTINCT, MAX, MIN, SUM,
    Dialect, Projection, RenderedQuery, StatsQuery,
)

_AGGREGATES = {
    COUNT_DISTINCT: "count(distinct {column})",
    COUNT: "count({column})",
    SUM: "sum({column})",
    MIN: "min({column})",
    MAX: "max({column})",
    COLUMN: "{column}",
}


def format_timestamp(value: datetime) -> str:
    """UTC timestamp text with microseconds, parsed by the engine as UTC."""
    return as_utc(value).strftime("%Y-%m-%d %H:%M:%S.%f")


class ClickHouseDialect(Dialect):
    name = "clickhouse"

    def render(self, query: StatsQuery) -> RenderedQuery:
        params: list[Any] = []

        select = ",\n    ".join(self._projection(p, query, params) for p in query.projections)
        sql = f'SELECT\n    {select}\nFROM "{query.table}"'

        where = []
        if query.hashtag is not None:
            func = "startsWith" if query.hashtag.prefix else "equals"
            where.append(f"{func}({query.hashtag.column}, %s)")
            params.append(query.hashtag.value)
        if query.window is not None:
            column = query.window.column
            where.append(f"{column} > parseDateTimeBestEffortOrNull(%s, 'UTC')")
            where.append(f"{column} < parseDateTimeBestEffortOrNull(%s, 'UTC')")
            params.append(format_timestamp(query.window.start))
            params.append(format_timestamp(query.window.end))
        if where:
            sql += "\nWHERE\n    " + "\n    AND ".join(where)

        if query.group_by:
            sql += "\nGROUP BY\n    " + ", ".join(query.group_by)
        if query.order_by:
            sql += "\nORDER BY\n    " + ", ".join(
                f"{o.alias} {'DESC' if o.descending else 'ASC'}" for o in query.order_by
            )
        if query.limit is not None:
            sql += "\nLIMIT %s"
            params.append(int(query.limit))

        return RenderedQuery(sql=sql, params=tuple(params))

    @staticmethod
    def _projection(p: Projection, query: StatsQuery, params: list[Any]) -> str:
        if p.kind == COUNT_ALL:
            return f"count(*) AS {p.alias}"

        if p.kind in (BUCKET_START, BUCKET_END):
            if query.bucket is None:
                raise ValueError(f"Projection {p.alias!r} needs a bucket")
            start = f"toStartOfInterval({query.bucket.column}, INTERVAL %s)"
            params.append(query.bucket.interval)
            if p.kind == BUCKET_START:
                return f"{start} AS {p.alias}"
            params.append(query.bucket.interval)
            return f"{start} + INTERVAL %s AS {p.alias}"

        if p.kind == COLUMN and p.alias == p.column:
            return p.column
        return f"{_AGGREGATES[p.kind].format(column=p.column)} AS {p.alias}"
