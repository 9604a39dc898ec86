"""Clock sources for time-dependent validation."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


def to_utc(moment: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive datetimes are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


class Clock(Protocol):
    """Protocol for anything that can tell the current time."""

    def now(self) -> datetime:
        """Return the current instant."""
        ...


class SystemClock:
    """Wall clock, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


@dataclass(frozen=True)
class FixedClock:
    """Clock that always returns the same instant."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant
