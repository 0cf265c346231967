"""Clock capability and time range resolution.

"now" is read through an injected Clock so that every default is resolved
explicitly, once per repository call, and tests can pin it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Always returns the same instant."""

    def __init__(self, instant: datetime):
        self.instant = as_utc(instant)

    def now(self) -> datetime:
        return self.instant


def as_utc(value: datetime) -> datetime:
    """Normalize to aware UTC. Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class TimeRange:
    """Resolved query window. ``start < end`` is not enforced."""
    start: datetime
    end: datetime

    @classmethod
    def resolve(
        cls, start: datetime | None, end: datetime | None, clock: Clock,
    ) -> TimeRange:
        """Fill in missing bounds: start -> Unix epoch, end -> clock.now()."""
        return cls(
            start=as_utc(start) if start is not None else EPOCH,
            end=as_utc(end) if end is not None else clock.now(),
        )
