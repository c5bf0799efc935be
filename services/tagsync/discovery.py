"""
Note discovery for tagsync

Walks the notes directory, keeps dated notes inside the sync window and
reads their front matter tags. File reads and parsing run in a thread pool.
"""

import os
import logging
from pathlib import Path
from datetime import date, datetime
from typing import Iterator, List, Optional
from concurrent.futures import ThreadPoolExecutor

from .errors import ParseError
from .extractor import extract_tags
from .models import Note, SyncWindow

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def iter_note_paths(root: Path, suffix: str = ".md") -> Iterator[Path]:
    """Yield note files under root, pruning hidden directories and files."""
    if not Path(root).is_dir():
        logger.warning(f"Notes directory does not exist: {root}")
        return

    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk never descends into hidden directories
        dirnames[:] = sorted(d for d in dirnames if not d.startswith(HIDDEN_PREFIX))
        for name in sorted(filenames):
            if name.startswith(HIDDEN_PREFIX) or not name.endswith(suffix):
                continue
            yield Path(dirpath) / name


def date_from_path(path: Path, date_format: str = "%Y-%m-%d") -> Optional[date]:
    """Parse the note date from the file name (without suffix)."""
    try:
        return datetime.strptime(path.stem, date_format).date()
    except ValueError:
        return None


def _load_note(path: Path, note_date: date) -> Optional[Note]:
    """Read one note and extract its tags. (I/O-bound, runs in thread pool)"""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None

    try:
        tags = extract_tags(content)
    except ParseError as e:
        logger.warning(f"Skipping {path}: {e}")
        return None

    return Note(path=path, date=note_date, tags=tuple(tags))


def discover(
    root: Path,
    starting_date: date,
    today: Optional[date] = None,
    suffix: str = ".md",
    date_format: str = "%Y-%m-%d",
    max_workers: Optional[int] = None,
) -> List[Note]:
    """
    Collect the notes dated inside (starting_date, yesterday].

    Args:
        root: Directory to walk
        starting_date: Date of the latest recorded point (exclusive bound)
        today: Current UTC date; yesterday is the inclusive upper bound
        suffix: Note file suffix
        date_format: strptime format of the note file name
        max_workers: Thread pool size (None = CPU count)

    Returns:
        Notes sorted by date, oldest first
    """
    window = SyncWindow.for_run(starting_date, today)
    logger.info(f"Getting notes from {root} with {window}")

    candidates = []
    for path in iter_note_paths(root, suffix):
        note_date = date_from_path(path, date_format)
        if note_date is None:
            logger.debug(f"No date in file name, skipping: {path}")
            continue
        if window.contains(note_date):
            candidates.append((path, note_date))

    if not candidates:
        return []

    workers = max_workers or os.cpu_count() or 1
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="discovery") as executor:
        results = list(executor.map(lambda c: _load_note(*c), candidates))

    notes = [note for note in results if note is not None]
    notes.sort(key=lambda n: n.date)
    logger.info(f"Found {len(notes)} notes ({len(candidates) - len(notes)} skipped)")
    return notes
