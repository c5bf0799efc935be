"""
tagsync - push Obsidian daily note tags into InfluxDB

Every note named after its day (e.g. 2024-01-31.md) contributes one point per
front matter tag containing the tag marker. Each run starts from the day of
the latest point already in InfluxDB and stops at yesterday.

Usage:
    tagsync              # Sync new notes
    tagsync --dry-run    # Show what would be written
    tagsync -v           # Debug logging
    python -m tagsync    # Same as tagsync

Settings come from the environment (or .env): DB_HOST, DB_NAME, DB_PORT,
NOTES_DIR and VAULT_PATH are required.
"""

import sys
import logging
import argparse
from typing import List, Optional

from .config import load_settings
from .errors import ConfigError, TagSyncError
from .sync import run

logger = logging.getLogger("tagsync")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 78  # EX_CONFIG from sysexits.h


def setup_logging(level: str = "INFO", verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Push daily note tags into InfluxDB")
    parser.add_argument("--dry-run", action="store_true",
                        help="Resolve, discover and expand, but do not write")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        setup_logging(verbose=args.verbose)
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG

    setup_logging(settings.log_level, args.verbose)
    logger.info(f"Syncing {settings.notes_path} into {settings.influx_url}/{settings.db_name}")

    try:
        report = run(settings, dry_run=args.dry_run)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG
    except TagSyncError as e:
        logger.error(f"Sync failed: {e}")
        return EXIT_FAILURE

    logger.info(
        f"Finished: {report.notes} notes, {report.records} points, "
        f"{'written' if report.written else 'nothing written'}"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
