"""Tests for ohsome_stats.core.response."""

from datetime import datetime, timedelta, timezone

from ohsome_stats.config import AttributionConfig
from ohsome_stats.core.response import (
    STATIC_SNAPSHOT, ResponseAssembler, Stopwatch, format_instant,
)
from tests.helpers import fixed_clock


def _assembler(**kw) -> ResponseAssembler:
    kw.setdefault("clock", fixed_clock())
    return ResponseAssembler(AttributionConfig(), api_version="1.2.3", **kw)


class TestFormatInstant:
    def test_utc_z_suffix(self):
        value = datetime(2017, 10, 1, 4, 0, tzinfo=timezone(timedelta(hours=5)))
        assert format_instant(value) == "2017-09-30T23:00:00Z"

    def test_naive_taken_as_utc(self):
        assert format_instant(datetime(2020, 10, 1, 4, 0)) == "2020-10-01T04:00:00Z"


class TestEcho:
    def test_only_given_dates(self):
        start = datetime(2020, 1, 1, tzinfo=timezone.utc)
        assert ResponseAssembler.echo_request_parameters(start, None) == {
            "startdate": "2020-01-01T00:00:00Z",
        }
        assert ResponseAssembler.echo_request_parameters(None, None) == {}

    def test_point_stats_merges(self):
        stats = {"changesets": 1, "hashtag": "&uganda"}
        end = datetime(2020, 10, 1, 4, 0, tzinfo=timezone.utc)
        merged = _assembler().point_stats(stats, None, end)
        assert merged == {"changesets": 1, "hashtag": "&uganda", "enddate": "2020-10-01T04:00:00Z"}
        assert "enddate" not in stats


class TestQueryInfo:
    def test_defaults_resolved(self):
        info = _assembler().query_info(None, None, hashtag="&uganda", interval="P1M")
        assert info == {
            "timespan": {
                "startDate": "1970-01-01T00:00:00Z",
                "endDate": "2024-01-01T12:00:00Z",
                "interval": "P1M",
            },
            "hashtag": "&uganda",
        }

    def test_limit_without_hashtag(self):
        info = _assembler().query_info(None, None, limit=10)
        assert info["limit"] == 10
        assert "hashtag" not in info
        assert "interval" not in info["timespan"]


class TestEnvelope:
    def test_shape(self):
        resp = _assembler().envelope(
            [1, 2], execution_time_ms=12, request_url="http://testserver/metadata",
        )
        assert resp == {
            "result": [1, 2],
            "attribution": {
                "url": "https://ohsome.org/copyrights",
                "text": "© OpenStreetMap contributors",
            },
            "metadata": {
                "executionTime": 12,
                "requestUrl": "http://testserver/metadata",
                "apiVersion": "1.2.3",
            },
        }

    def test_query_included_when_given(self):
        resp = _assembler().envelope([], execution_time_ms=0, request_url="u", query={"limit": 3})
        assert resp["query"] == {"limit": 3}


class TestStopwatch:
    def test_measures_non_negative(self):
        with Stopwatch() as sw:
            pass
        assert sw.elapsed_ms >= 0


def test_static_snapshot_constant():
    assert STATIC_SNAPSHOT["hashtag"] == "*"
    assert STATIC_SNAPSHOT["changesets"] == 65009011
    assert len(STATIC_SNAPSHOT) == 7
