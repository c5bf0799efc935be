"""
Maps note tags to InfluxDB points.

Each taggable tag of a note gets its own second past midnight, so tags
of one note never share a timestamp. Offsets restart for every note, even
when two notes carry the same date.
"""

from datetime import datetime, time, timedelta, timezone
from typing import Iterable, List

from .models import Note, PointRecord, WEEKDAYS

DEFAULT_MARKER = "#"


def is_taggable(tag: str, marker: str = DEFAULT_MARKER) -> bool:
    return marker in tag


def expand_note(note: Note, marker: str = DEFAULT_MARKER) -> List[PointRecord]:
    midnight = datetime.combine(note.date, time(0), tzinfo=timezone.utc)
    weekday = WEEKDAYS[note.date.weekday()]
    taggable = [tag for tag in note.tags if is_taggable(tag, marker)]
    return [
        PointRecord(
            timestamp=midnight + timedelta(seconds=index),
            weekday=weekday,
            tag=tag,
        )
        for index, tag in enumerate(taggable)
    ]


def expand(notes: Iterable[Note], marker: str = DEFAULT_MARKER) -> List[PointRecord]:
    """Expand notes into point records, in note order."""
    records = []
    for note in notes:
        records.extend(expand_note(note, marker))
    return records
