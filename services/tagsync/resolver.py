"""
Starting point for an incremental sync.
"""

import logging
from datetime import datetime

from .errors import ResolveError
from .models import EPOCH

logger = logging.getLogger(__name__)


def resolve_starting_point(sink, measurement: str) -> datetime:
    """
    Timestamp of the latest point already in the sink.

    Falls back to the epoch when the sink is unreachable or the series is
    empty, which makes the run a full backfill. Never raises.
    """
    logger.info("Reading latest entry from InfluxDB...")
    try:
        latest = sink.query_latest(measurement)
    except ResolveError as e:
        logger.warning(f"Could not read latest entry, starting from epoch: {e}")
        return EPOCH

    if latest is None:
        logger.info(f"No points in {measurement}, starting from epoch")
        return EPOCH

    return latest
