"""
InfluxDB sink

Thin client for the InfluxDB 1.x HTTP API: reads the latest point of a
measurement and writes point batches in line protocol.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import httpx

from .config import Settings
from .errors import ConfigError, ResolveError, SinkWriteError
from .models import PointRecord

logger = logging.getLogger(__name__)

WEEKDAY_TAG = "weekday"
FRONTMATTER_TAG = "frontmatter_tag"
VALUE_FIELD = "value"


def _escape_measurement(name: str) -> str:
    return name.replace(",", r"\,").replace(" ", r"\ ")


def _escape_tag(value: str) -> str:
    return value.replace(",", r"\,").replace("=", r"\=").replace(" ", r"\ ")


def to_line(measurement: str, point: PointRecord) -> str:
    """Render a point as one line of line protocol (second precision)."""
    seconds = int(point.timestamp.timestamp())
    return (
        f"{_escape_measurement(measurement)},"
        f"{WEEKDAY_TAG}={_escape_tag(point.weekday)},"
        f"{FRONTMATTER_TAG}={_escape_tag(point.tag)} "
        f"{VALUE_FIELD}={point.value}i {seconds}"
    )


class InfluxSink:
    """Reads and writes tag points in one InfluxDB database."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        self.database = settings.db_name
        if client is None:
            try:
                client = httpx.Client(
                    base_url=settings.influx_url,
                    timeout=settings.http_timeout,
                )
            except httpx.InvalidURL as e:
                raise ConfigError(f"Invalid InfluxDB URL {settings.influx_url!r}: {e}") from e
        self.client = client

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.client.close()

    def query_latest(self, measurement: str) -> Optional[datetime]:
        """
        Return the timestamp of the most recent point, or None if the
        measurement holds no points.

        Raises:
            ResolveError: The query failed or the reply could not be decoded
        """
        query = f'SELECT * FROM "{measurement}" ORDER BY time DESC LIMIT 1'
        try:
            response = self.client.get(
                "/query",
                params={"db": self.database, "q": query, "epoch": "s"},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise ResolveError(f"Query failed: {e}") from e
        except ValueError as e:
            raise ResolveError(f"Query reply is not JSON: {e}") from e

        try:
            result = payload["results"][0]
            if "error" in result:
                raise ResolveError(f"Query error: {result['error']}")
            series = result.get("series") or []
            if not series or not series[0].get("values"):
                return None
            columns = series[0]["columns"]
            seconds = series[0]["values"][0][columns.index("time")]
            return datetime.fromtimestamp(int(seconds), tz=timezone.utc)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ResolveError(f"Unexpected query reply: {e}") from e

    def write_batch(self, measurement: str, points: Sequence[PointRecord]) -> None:
        """
        Write all points in one request.

        Raises:
            SinkWriteError: The write request failed
        """
        lines: List[str] = [to_line(measurement, p) for p in points]
        try:
            response = self.client.post(
                "/write",
                params={"db": self.database, "precision": "s"},
                content="\n".join(lines).encode("utf-8"),
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SinkWriteError(f"Could not push {len(lines)} points to InfluxDB: {e}") from e
        logger.info(f"Pushed {len(lines)} points into {self.database}/{measurement}")
