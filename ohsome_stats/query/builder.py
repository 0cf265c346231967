"""QueryBuilder: the four read shapes against the stats relation."""

from __future__ import annotations

from ohsome_stats.core.clock import TimeRange
from ohsome_stats.core.hashtag import HashtagExpression
from ohsome_stats.query.interface import (
    BUCKET_END, BUCKET_START, COLUMN, COUNT, COUNT_ALL, COUNT_DISTINCT, MAX, MIN, SUM,
    Bucket, HashtagPredicate, OrderBy, Projection, StatsQuery, TimeWindow,
)

# Columns of the stats relation
CHANGESET_ID = "changeset_id"
USER_ID = "user_id"
ROAD_LENGTH = "road_length"
BUILDING_AREA = "building_area"
HASHTAG = "hashtag"
TIMESTAMP = "changeset_timestamp"

_CONTRIBUTION_COUNTS = (
    Projection(COUNT_DISTINCT, "changesets", CHANGESET_ID),
    Projection(COUNT_DISTINCT, "users", USER_ID),
    Projection(SUM, "roads", ROAD_LENGTH),
    Projection(COUNT, "buildings", BUILDING_AREA),
    Projection(COUNT_ALL, "edits"),
)


class QueryBuilder:
    """Builds dialect-neutral StatsQuery objects.

    The interval passed to ``interval_aggregate`` must already be in native
    form ("1 MONTH"); see ``ohsome_stats.core.interval``.
    """

    def __init__(self, table: str = "stats"):
        self.table = table

    @staticmethod
    def _hashtag(expr: HashtagExpression) -> HashtagPredicate:
        return HashtagPredicate(column=HASHTAG, value=expr.bound_value, prefix=expr.is_wildcard)

    @staticmethod
    def _window(time_range: TimeRange) -> TimeWindow:
        return TimeWindow(column=TIMESTAMP, start=time_range.start, end=time_range.end)

    def point_aggregate(self, expr: HashtagExpression, time_range: TimeRange) -> StatsQuery:
        return StatsQuery(
            table=self.table,
            projections=_CONTRIBUTION_COUNTS + (Projection(MAX, "latest", TIMESTAMP),),
            hashtag=self._hashtag(expr),
            window=self._window(time_range),
        )

    def interval_aggregate(
        self, expr: HashtagExpression, time_range: TimeRange, interval: str,
    ) -> StatsQuery:
        return StatsQuery(
            table=self.table,
            projections=_CONTRIBUTION_COUNTS + (
                Projection(BUCKET_START, "startdate"),
                Projection(BUCKET_END, "enddate"),
            ),
            hashtag=self._hashtag(expr),
            window=self._window(time_range),
            bucket=Bucket(column=TIMESTAMP, interval=interval),
            group_by=("startdate",),
            order_by=(OrderBy("startdate"),),
        )

    def most_used_hashtags(self, time_range: TimeRange, limit: int) -> StatsQuery:
        return StatsQuery(
            table=self.table,
            projections=(
                Projection(COLUMN, "hashtag", HASHTAG),
                Projection(COUNT_DISTINCT, "number_of_users", USER_ID),
            ),
            window=self._window(time_range),
            group_by=(HASHTAG,),
            order_by=(OrderBy("number_of_users", descending=True), OrderBy("hashtag")),
            limit=limit,
        )

    def metadata(self) -> StatsQuery:
        return StatsQuery(
            table=self.table,
            projections=(
                Projection(MIN, "min_timestamp", TIMESTAMP),
                Projection(MAX, "max_timestamp", TIMESTAMP),
            ),
        )
