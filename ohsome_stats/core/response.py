"""Response shaping: echoed parameters, attribution and execution metadata."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Any

from ohsome_stats import __version__
from ohsome_stats.config import AttributionConfig
from ohsome_stats.core.clock import Clock, SystemClock, TimeRange, as_utc

# Snapshot served by /stats_static when live data is not wanted.
STATIC_SNAPSHOT: dict[str, Any] = {
    "changesets": 65009011,
    "users": 3003842,
    "roads": 45964973.0494135,
    "buildings": 844294167,
    "edits": 1095091515,
    "latest": "2023-03-20T10:55:38.000Z",
    "hashtag": "*",
}


def format_instant(value: datetime) -> str:
    """UTC ISO-8601 with a trailing Z, e.g. 2017-09-30T23:00:00Z."""
    return as_utc(value).isoformat().replace("+00:00", "Z")


class Stopwatch:
    """Context manager measuring wall time in whole milliseconds."""

    def __init__(self):
        self._t0 = 0.0
        self.elapsed_ms = 0

    def __enter__(self) -> Stopwatch:
        self._t0 = time.monotonic()
        return self

    def __exit__(self, *exc) -> None:
        self.elapsed_ms = int((time.monotonic() - self._t0) * 1000)


class ResponseAssembler:
    """Merges repository output with request echo and execution metadata."""

    def __init__(
        self,
        attribution: AttributionConfig | None = None,
        *,
        api_version: str = __version__,
        clock: Clock | None = None,
    ):
        self.attribution = attribution or AttributionConfig()
        self.api_version = api_version
        self.clock = clock or SystemClock()

    @staticmethod
    def echo_request_parameters(start: datetime | None, end: datetime | None) -> dict[str, str]:
        """Echo only the dates the caller actually sent."""
        params: dict[str, str] = {}
        if start is not None:
            params["startdate"] = format_instant(start)
        if end is not None:
            params["enddate"] = format_instant(end)
        return params

    def point_stats(self, stats: dict, start: datetime | None, end: datetime | None) -> dict:
        return stats | self.echo_request_parameters(start, end)

    def query_info(
        self,
        start: datetime | None,
        end: datetime | None,
        *,
        hashtag: str | None = None,
        interval: str | None = None,
        limit: int | None = None,
    ) -> dict[str, Any]:
        """Describe the effective query. Absent dates show their defaults."""
        resolved = TimeRange.resolve(start, end, self.clock)
        timespan = {
            "startDate": format_instant(resolved.start),
            "endDate": format_instant(resolved.end),
            "interval": interval,
        }
        info = {
            "timespan": {k: v for k, v in timespan.items() if v is not None},
            "hashtag": hashtag,
            "limit": limit,
        }
        return {k: v for k, v in info.items() if v is not None}

    def metadata(self, execution_time_ms: int, request_url: str) -> dict[str, Any]:
        return {
            "executionTime": execution_time_ms,
            "requestUrl": request_url,
            "apiVersion": self.api_version,
        }

    def envelope(
        self,
        result: Any,
        *,
        execution_time_ms: int,
        request_url: str,
        query: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        response: dict[str, Any] = {
            "result": result,
            "attribution": {"url": self.attribution.url, "text": self.attribution.text},
            "metadata": self.metadata(execution_time_ms, request_url),
        }
        if query is not None:
            response["query"] = query
        return response
