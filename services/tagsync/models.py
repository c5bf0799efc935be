"""
Data types shared across tagsync
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Tuple

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Fixed English names so the series does not depend on the process locale
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class Note:
    """A dated note file and the tags read from its front matter."""
    path: Path
    date: date
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PointRecord:
    """One tag-presence point: tag was present on this day, at this offset."""
    timestamp: datetime  # UTC, midnight + occurrence index seconds
    weekday: str
    tag: str
    value: int = 1


@dataclass(frozen=True)
class SyncWindow:
    """Dates eligible for one run: (starting_date, yesterday]."""
    starting_date: date
    yesterday: date

    @classmethod
    def for_run(cls, starting_date: date, today: Optional[date] = None) -> "SyncWindow":
        if today is None:
            today = utc_today()
        return cls(starting_date=starting_date, yesterday=today - timedelta(days=1))

    def contains(self, day: date) -> bool:
        return self.starting_date < day <= self.yesterday

    def __repr__(self):
        return f"SyncWindow({self.starting_date} < date <= {self.yesterday})"


@dataclass
class SyncReport:
    """Outcome of a sync run."""
    starting_date: date
    notes: int = 0
    records: int = 0
    written: bool = False
