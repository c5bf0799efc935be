import pytest

from tagsync.config import Settings


class FakeSink:
    """In-memory stand-in for InfluxSink."""

    def __init__(self, latest=None, query_error=None, write_error=None):
        self.latest = latest
        self.query_error = query_error
        self.write_error = write_error
        self.queries = []
        self.writes = []

    def query_latest(self, measurement):
        self.queries.append(measurement)
        if self.query_error is not None:
            raise self.query_error
        return self.latest

    def write_batch(self, measurement, points):
        if self.write_error is not None:
            raise self.write_error
        self.writes.append((measurement, list(points)))
        # Later queries see the newest written point
        if points:
            self.latest = max(p.timestamp for p in points)


def note_text(tags=None, body="Some notes for the day.\n"):
    """Build a note with YAML front matter listing the given tags."""
    lines = ["---", "title: Daily"]
    if tags is not None:
        lines.append("tags:")
        lines.extend(f'  - "{tag}"' for tag in tags)
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def vault(tmp_path):
    """Vault root with an empty daily notes directory."""
    (tmp_path / "Daily").mkdir()
    return tmp_path


@pytest.fixture
def write_note(vault):
    def _write(relative, tags=None, text=None):
        path = vault / "Daily" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text if text is not None else note_text(tags), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def settings(vault):
    return Settings(
        db_host="localhost",
        db_name="notes",
        db_port="8086",
        notes_dir="Daily",
        vault_path=str(vault),
        discovery_workers=2,
        _env_file=None,
    )


@pytest.fixture
def fake_sink():
    return FakeSink()
