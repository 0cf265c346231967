"""Dataset metadata endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request

from ohsome_stats.api.utils import run_query
from ohsome_stats.core.response import Stopwatch
from ohsome_stats.core.services import Services


def register_routes(router: APIRouter, svc: Services, **kw):
    repo = svc.repository
    responses = svc.responses

    @router.get("/metadata", summary="Returns maximum and minimum timestamps of the database.")
    def api_metadata(request: Request):
        with Stopwatch() as sw:
            result = run_query(repo.get_metadata)
        return responses.envelope(
            result, execution_time_ms=sw.elapsed_ms, request_url=str(request.url),
        )
