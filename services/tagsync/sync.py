"""
Sync driver: resolve -> discover -> expand -> write.
"""

import logging
from datetime import date
from typing import Optional

from .config import Settings
from .discovery import discover
from .errors import EmptyExpansionError
from .influx import InfluxSink
from .mapper import expand
from .models import SyncReport
from .resolver import resolve_starting_point

logger = logging.getLogger(__name__)


def run(
    settings: Settings,
    sink=None,
    today: Optional[date] = None,
    dry_run: bool = False,
) -> SyncReport:
    """
    Push the tags of every note written since the last recorded day.

    Args:
        settings: Loaded settings
        sink: Object with query_latest/write_batch (defaults to an InfluxSink)
        today: Current UTC date, notes from today onward are left for later runs
        dry_run: Do everything except the write

    Returns:
        SyncReport for the run

    Raises:
        EmptyExpansionError: Notes were found but none had a taggable tag
        SinkWriteError: The batch write failed
    """
    if sink is None:
        with InfluxSink(settings) as influx:
            return run(settings, sink=influx, today=today, dry_run=dry_run)

    measurement = settings.series_name

    starting_date = resolve_starting_point(sink, measurement).date()
    logger.info(f"Using {starting_date} as starting point")
    report = SyncReport(starting_date=starting_date)

    logger.info(f"Vault path: {settings.notes_path}")
    notes = discover(
        settings.notes_path,
        starting_date,
        today=today,
        suffix=settings.note_suffix,
        date_format=settings.date_format,
        max_workers=settings.discovery_workers,
    )
    report.notes = len(notes)
    if not notes:
        logger.info("No new notes found, nothing to do")
        return report

    records = expand(notes, settings.tag_marker)
    report.records = len(records)
    if not records:
        raise EmptyExpansionError(
            f"{len(notes)} notes found but none has a tag containing "
            f"'{settings.tag_marker}'"
        )
    logger.info(f"Expanded {len(notes)} notes into {len(records)} points")

    if dry_run:
        for record in records:
            logger.debug(f"Dry run: {record.timestamp.isoformat()} {record.tag}")
        logger.info("Dry run, skipping write")
        return report

    sink.write_batch(measurement, records)
    report.written = True
    return report
