"""Result records returned by the stats repository.

Each record is built once from an engine row and never mutated. ``to_dict()``
yields the ordered key-value shape exposed to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def _count(value: Any) -> int:
    """Engine aggregates may come back as NULL, Decimal, or text."""
    if value is None:
        return 0
    return int(value)


def _amount(value: Any) -> int | float:
    if value is None:
        return 0
    if isinstance(value, (Decimal, str)):
        number = float(value)
        return int(number) if number.is_integer() else number
    return value


def _temporal(value: Any) -> datetime | date | None:
    """Coerce engine timestamps. Date-only strings stay dates (bucket starts)."""
    if value is None or isinstance(value, (datetime, date)):
        return value
    text = str(value).strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text.replace(" ", "T"))


def _iso(value: datetime | date | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class AggregateRecord:
    """Point-in-time aggregate for one hashtag expression."""
    changesets: int
    users: int
    roads: int | float
    buildings: int
    edits: int
    latest: datetime | None

    @classmethod
    def from_row(cls, row: dict) -> AggregateRecord:
        return cls(
            changesets=_count(row.get("changesets")),
            users=_count(row.get("users")),
            roads=_amount(row.get("roads")),
            buildings=_count(row.get("buildings")),
            edits=_count(row.get("edits")),
            latest=_temporal(row.get("latest")),
        )

    def to_dict(self) -> dict:
        return {
            "changesets": self.changesets,
            "users": self.users,
            "roads": self.roads,
            "buildings": self.buildings,
            "edits": self.edits,
            "latest": _iso(self.latest),
        }


@dataclass(frozen=True)
class IntervalRecord:
    """Aggregate for one populated time bucket."""
    changesets: int
    users: int
    roads: int | float
    buildings: int
    edits: int
    startdate: datetime | date | None
    enddate: datetime | date | None

    @classmethod
    def from_row(cls, row: dict) -> IntervalRecord:
        return cls(
            changesets=_count(row.get("changesets")),
            users=_count(row.get("users")),
            roads=_amount(row.get("roads")),
            buildings=_count(row.get("buildings")),
            edits=_count(row.get("edits")),
            startdate=_temporal(row.get("startdate")),
            enddate=_temporal(row.get("enddate")),
        )

    def to_dict(self) -> dict:
        return {
            "changesets": self.changesets,
            "users": self.users,
            "roads": self.roads,
            "buildings": self.buildings,
            "edits": self.edits,
            "startdate": _iso(self.startdate),
            "enddate": _iso(self.enddate),
        }


@dataclass(frozen=True)
class HashtagUsageRecord:
    hashtag: str
    number_of_users: int

    @classmethod
    def from_row(cls, row: dict) -> HashtagUsageRecord:
        return cls(hashtag=row["hashtag"], number_of_users=_count(row.get("number_of_users")))

    def to_dict(self) -> dict:
        return {"hashtag": self.hashtag, "number_of_users": self.number_of_users}


@dataclass(frozen=True)
class MetadataRecord:
    """Dataset-wide timestamp bounds."""
    min_timestamp: datetime | None
    max_timestamp: datetime | None

    @classmethod
    def from_row(cls, row: dict) -> MetadataRecord:
        return cls(
            min_timestamp=_temporal(row.get("min_timestamp")),
            max_timestamp=_temporal(row.get("max_timestamp")),
        )

    def to_dict(self) -> dict:
        return {
            "min_timestamp": _iso(self.min_timestamp),
            "max_timestamp": _iso(self.max_timestamp),
        }
