"""Dialect-neutral query description and the Dialect ABC that renders it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


# Projection kinds understood by every dialect
COUNT_DISTINCT = "count_distinct"
COUNT = "count"            # non-null values of a column
COUNT_ALL = "count_all"    # count(*)
SUM = "sum"
MIN = "min"
MAX = "max"
COLUMN = "column"
BUCKET_START = "bucket_start"
BUCKET_END = "bucket_end"

PROJECTION_KINDS = frozenset({
    COUNT_DISTINCT, COUNT, COUNT_ALL, SUM, MIN, MAX, COLUMN, BUCKET_START, BUCKET_END,
})


@dataclass(frozen=True)
class Projection:
    """One output column: ``kind(column) AS alias``."""
    kind: str
    alias: str
    column: str | None = None

    def __post_init__(self):
        if self.kind not in PROJECTION_KINDS:
            raise ValueError(f"Unknown projection kind: {self.kind!r}")


@dataclass(frozen=True)
class HashtagPredicate:
    """Prefix match when ``prefix`` is set, exact match otherwise."""
    column: str
    value: str
    prefix: bool = False


@dataclass(frozen=True)
class TimeWindow:
    """Strict window: ``start < column < end``."""
    column: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class Bucket:
    """Time bucketing of ``column`` by a native interval such as "1 MONTH"."""
    column: str
    interval: str


@dataclass(frozen=True)
class OrderBy:
    alias: str
    descending: bool = False


@dataclass(frozen=True)
class StatsQuery:
    """Everything a dialect needs to render one read against the stats relation."""
    table: str
    projections: tuple[Projection, ...]
    hashtag: HashtagPredicate | None = None
    window: TimeWindow | None = None
    bucket: Bucket | None = None
    group_by: tuple[str, ...] = ()
    order_by: tuple[OrderBy, ...] = ()
    limit: int | None = None


@dataclass(frozen=True)
class RenderedQuery:
    """SQL text plus parameters in placeholder order."""
    sql: str
    params: tuple[Any, ...] = field(default_factory=tuple)


class Dialect(ABC):
    """Abstract base for SQL dialect adapters."""

    name: str = ""

    @abstractmethod
    def render(self, query: StatsQuery) -> RenderedQuery:
        """Render a neutral query into engine SQL and ordered parameters."""
