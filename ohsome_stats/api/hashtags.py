"""Hashtag ranking endpoints."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Query, Request

from ohsome_stats.api.utils import run_query
from ohsome_stats.core.response import Stopwatch
from ohsome_stats.core.services import Services


def register_routes(router: APIRouter, svc: Services, **kw):
    repo = svc.repository
    responses = svc.responses

    @router.get(
        "/mostUsedHashtags",
        summary="Returns the most used Hashtag by user count in a given Timeperiod.",
    )
    def api_most_used_hashtags(
        request: Request,
        startdate: datetime | None = Query(
            None, description="the start date for the query in ISO format (e.g. 2014-01-01T00:00:00Z). Default: start of data",
        ),
        enddate: datetime | None = Query(
            None, description="the (exclusive) end date for the query in ISO format (e.g. 2023-01-01T00:00:00Z). Default: now",
        ),
        limit: int = Query(
            svc.config.query.default_limit, ge=1, le=1000,
            description="the number of hashtags to return",
        ),
    ):
        with Stopwatch() as sw:
            result = run_query(lambda: repo.get_most_used_hashtags(startdate, enddate, limit))
        return responses.envelope(
            result,
            execution_time_ms=sw.elapsed_ms,
            request_url=str(request.url),
            query=responses.query_info(startdate, enddate, limit=limit),
        )
