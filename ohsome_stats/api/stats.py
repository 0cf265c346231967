"""Hashtag statistics endpoints."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Path, Query, Request

from ohsome_stats.api.utils import run_query
from ohsome_stats.core.hashtag import HashtagExpression
from ohsome_stats.core.response import STATIC_SNAPSHOT, Stopwatch
from ohsome_stats.core.services import Services

_HASHTAG_DOC = "the hashtag to query for - case-sensitive and without the leading '#'; a trailing '*' matches by prefix"
_START_DOC = "the (exclusive) start date for the query in ISO format (e.g. 2020-01-01T00:00:00Z)"
_END_DOC = "the (exclusive) end date for the query in ISO format (e.g. 2020-01-01T00:00:00Z)"


def register_routes(router: APIRouter, svc: Services, **kw):
    repo = svc.repository
    responses = svc.responses

    @router.get("/stats/{hashtag}", summary="Returns live data from DB")
    def api_stats(
        hashtag: str = Path(..., description=_HASHTAG_DOC),
        startdate: datetime | None = Query(None, description=_START_DOC),
        enddate: datetime | None = Query(None, description=_END_DOC),
    ):
        expr = HashtagExpression.parse(hashtag)
        stats = run_query(lambda: repo.get_stats_for_time_span(expr, startdate, enddate))
        return responses.point_stats(stats, startdate, enddate)

    @router.get("/stats_static", summary="Returns a static snapshot of OSM statistics")
    def api_stats_static():
        return dict(STATIC_SNAPSHOT)

    @router.get("/stats/{hashtag}/interval", summary="Returns live data from DB aggregated by interval")
    def api_stats_interval(
        request: Request,
        hashtag: str = Path(..., description=_HASHTAG_DOC),
        startdate: datetime | None = Query(None, description=_START_DOC),
        enddate: datetime | None = Query(None, description=_END_DOC),
        interval: str = Query(
            svc.config.query.default_interval,
            description="the granularity defined as Intervals in ISO 8601 time format eg: P1M",
        ),
    ):
        expr = HashtagExpression.parse(hashtag)
        with Stopwatch() as sw:
            result = run_query(
                lambda: repo.get_stats_for_time_span_interval(expr, startdate, enddate, interval)
            )
        return responses.envelope(
            result,
            execution_time_ms=sw.elapsed_ms,
            request_url=str(request.url),
            query=responses.query_info(startdate, enddate, hashtag=hashtag, interval=interval),
        )
