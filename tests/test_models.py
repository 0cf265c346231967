"""Tests for ohsome_stats.core.models record mapping."""

import dataclasses
from datetime import date, datetime
from decimal import Decimal

import pytest

from ohsome_stats.core.models import (
    AggregateRecord, HashtagUsageRecord, IntervalRecord, MetadataRecord,
)


class TestAggregateRecord:
    def test_text_values_coerced(self):
        record = AggregateRecord.from_row({
            "changesets": "3", "users": "2", "roads": "140.5", "buildings": "1",
            "edits": "7", "latest": "2017-12-19 00:52:03",
        })
        assert record.changesets == 3
        assert record.roads == 140.5
        assert record.latest == datetime(2017, 12, 19, 0, 52, 3)

    def test_decimal_roads(self):
        record = AggregateRecord.from_row({"roads": Decimal("140")})
        assert record.roads == 140
        assert isinstance(record.roads, int)

    def test_nulls_become_zero(self):
        record = AggregateRecord.from_row({})
        assert record.to_dict() == {
            "changesets": 0, "users": 0, "roads": 0, "buildings": 0, "edits": 0,
            "latest": None,
        }

    def test_frozen(self):
        record = AggregateRecord.from_row({})
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.edits = 5


class TestIntervalRecord:
    def test_date_buckets(self):
        record = IntervalRecord.from_row({
            "edits": 1, "startdate": date(2021, 12, 1), "enddate": date(2022, 1, 1),
        })
        d = record.to_dict()
        assert d["startdate"] == "2021-12-01"
        assert d["enddate"] == "2022-01-01"


class TestHashtagUsageRecord:
    def test_from_row(self):
        record = HashtagUsageRecord.from_row({"hashtag": "#a", "number_of_users": "4"})
        assert record.to_dict() == {"hashtag": "#a", "number_of_users": 4}


class TestMetadataRecord:
    def test_datetimes_serialized(self):
        record = MetadataRecord.from_row({
            "min_timestamp": datetime(2016, 3, 5, 14, 0, 20),
            "max_timestamp": datetime(2021, 12, 9, 13, 1, 28),
        })
        assert record.min_timestamp == datetime(2016, 3, 5, 14, 0, 20)
        assert record.to_dict() == {
            "min_timestamp": "2016-03-05T14:00:20",
            "max_timestamp": "2021-12-09T13:01:28",
        }
